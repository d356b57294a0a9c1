"""
Ayudas para el calendario de reservas y el listado de contratos.

Todo trabaja sobre contratos ya leídos (instancias del modelo o dicts
importados) y devuelve listas nuevas; aquí no se guarda nada.
"""
import re
from datetime import date, datetime

from .amounts import read_field, service_items

PENDING = "pending"
BOOKED = "booked"
DELIVERED = "delivered"
CANCELLED = "cancelled"
PENDING_PAYMENT = "pending_payment"
CONFIRMED = "confirmed"
PENDING_APPROVAL = "pending_approval"
RELEASED = "released"

BOOKING_STATUSES = [
    PENDING,
    BOOKED,
    DELIVERED,
    CANCELLED,
    PENDING_PAYMENT,
    CONFIRMED,
    PENDING_APPROVAL,
    RELEASED,
]

_NON_DIGITS = re.compile(r"\D")


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def _minutes(value) -> int:
    if not value:
        return 0
    text = value.strftime("%H:%M") if hasattr(value, "strftime") else str(value)
    parts = text.split(":")
    try:
        hours = int(parts[0])
    except ValueError:
        hours = 0
    try:
        minutes = int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        minutes = 0
    return hours * 60 + minutes


def booking_status(contract) -> str:
    explicit = read_field(contract, "status")
    if explicit:
        return explicit
    if read_field(contract, "event_completed") and read_field(contract, "final_payment_paid"):
        return DELIVERED
    # sin la clave (documentos importados) cuenta como reservado
    if read_field(contract, "deposit_paid") is False:
        return PENDING_PAYMENT
    return BOOKED


def expand_sessions(contract) -> list:
    """
    Una entrada de calendario por cada servicio contratado.

    Cada sesión toma fecha, hora y lugar del formulario de reserva
    (`date_{i}`, `time_{i}`, `eventLocation_{i}`) y, si faltan, los del
    contrato. Un contrato sin servicios da una sola sesión con sus propios datos.
    """
    snapshot = read_field(contract, "form_snapshot", "formSnapshot")
    if not isinstance(snapshot, dict):
        snapshot = {}
    client_name = str(read_field(contract, "client_name") or "")
    event_date = _as_date(read_field(contract, "event_date"))
    base = {
        "contract": contract,
        "index": 0,
        "title": client_name,
        "event_date": event_date.isoformat() if event_date else "",
        "event_time": str(read_field(contract, "event_time") or ""),
        "event_location": str(read_field(contract, "event_location") or ""),
        "event_type": str(read_field(contract, "event_type") or ""),
        "package_duration": str(read_field(contract, "package_duration") or ""),
    }

    items = service_items(contract)
    if not items:
        return [base]

    sessions = []
    for index, item in enumerate(items):
        item = item if isinstance(item, dict) else {}
        name = item.get("name")
        sessions.append({
            **base,
            "index": index,
            "title": f"{client_name} — {name}" if name else client_name,
            "event_date": str(snapshot.get(f"date_{index}") or base["event_date"]),
            "event_time": str(snapshot.get(f"time_{index}") or base["event_time"]),
            "event_location": str(snapshot.get(f"eventLocation_{index}") or base["event_location"]),
            "event_type": str(item.get("type") or base["event_type"]),
            "package_duration": str(item.get("duration") or base["package_duration"]),
        })
    return sessions


def events_by_day(contracts, year: int, month: int, status: str = "all") -> dict:
    """
    Agrupa por día las sesiones de un mes.

    Las claves son fechas ISO; dentro de cada día las sesiones se ordenan por
    hora y después por título. El filtro de estado usa el estado del contrato.
    """
    days = {}
    for contract in contracts:
        if status != "all" and booking_status(contract) != status:
            continue
        for session in expand_sessions(contract):
            event_date = _as_date(session["event_date"])
            if event_date is None or event_date.year != year or event_date.month != month:
                continue
            days.setdefault(event_date.isoformat(), []).append(session)

    for sessions in days.values():
        sessions.sort(key=lambda s: (_minutes(s["event_time"]), s["title"]))
    return dict(sorted(days.items()))


def reference_date(contract):
    # fecha del evento; si falta, la del contrato o la de creación
    for name in ("event_date", "contract_date", "created_at"):
        value = _as_date(read_field(contract, name))
        if value is not None:
            return value
    return None


def sort_for_listing(contracts, today: date) -> list:
    """Primero los eventos pendientes, después los más cercanos a `today`."""
    def key(contract):
        ref = reference_date(contract) or today
        return (1 if read_field(contract, "event_completed") else 0, abs((ref - today).days))

    return sorted(contracts, key=key)


def matches_search(contract, term: str) -> bool:
    term = (term or "").strip().lower()
    if not term:
        return True
    name = str(read_field(contract, "client_name") or "").lower()
    event_type = str(read_field(contract, "event_type") or "").lower()
    if term in name or term in event_type:
        return True
    term_digits = _NON_DIGITS.sub("", term)
    if not term_digits:
        return False
    phone = read_field(contract, "client_phone")
    if not phone:
        snapshot = read_field(contract, "form_snapshot")
        phone = snapshot.get("phone") if isinstance(snapshot, dict) else ""
    return term_digits in _NON_DIGITS.sub("", str(phone or ""))
