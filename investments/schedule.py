"""
Plan de cuotas mensuales para una inversión.

Todo se calcula en centavos enteros: la suma de las cuotas es siempre igual al
total redondeado a dos decimales. Los centavos sobrantes de la división van,
uno por cuota, a las primeras cuotas (100 / 3 -> 33.34, 33.33, 33.33).
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from utils.money import floor_cents, from_cents, quantize_cents, to_cents, to_decimal
from utils.payments import add_months

PENDING = "pendiente"
PAID = "pagado"


@dataclass(frozen=True)
class ScheduledInstallment:
    investment_id: object
    installment_number: int
    amount: Decimal
    due_date: date
    status: str = PENDING
    paid_at: datetime = None


def _count(count) -> int:
    return max(1, int(count or 1))


def generate_installments(investment_id, start_date: date, total_amount, count) -> list:
    count = _count(count)
    total = to_decimal(total_amount)

    base_cents = floor_cents(total / count)
    remainder = to_cents(total) - base_cents * count

    installments = []
    for i in range(count):
        extra = 1 if i < remainder else 0
        installments.append(ScheduledInstallment(
            investment_id=investment_id,
            installment_number=i + 1,
            amount=from_cents(base_cents + extra),
            due_date=add_months(start_date, i),
        ))
    return installments


def per_installment_value(total_amount, count) -> Decimal:
    """Valor por cuota que muestra el formulario (truncado a centavos)."""
    return from_cents(floor_cents(to_decimal(total_amount) / _count(count)))


def installment_value(total_amount, count) -> Decimal:
    """Valor por cuota guardado en la inversión (redondeado a centavos)."""
    return quantize_cents(to_decimal(total_amount) / _count(count))
