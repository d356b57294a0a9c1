from datetime import date
import calendar


def add_months(d: date, months: int) -> date:
    """
    Avanza `months` meses conservando el día.
    Si el día no existe en el mes destino se usa el último día del mes (31/01 + 1 -> 29/02).
    """
    m = d.month - 1 + months
    y = d.year + m // 12
    m = m % 12 + 1
    day = min(d.day, calendar.monthrange(y, m)[1])
    return date(y, m, day)
