"""
Cálculo de montos de un contrato: total, seña (depósito) y saldo restante.

Las funciones son puras: reciben un contrato (modelo, dict o cualquier objeto
con los campos esperados) y no tocan la base de datos.
"""
from dataclasses import asdict, dataclass
from decimal import Decimal

from utils.money import ZERO, ceil_units, digits_to_int, round_units, to_decimal

SERVICE_DEPOSIT_RATE = Decimal("0.2")
STORE_DEPOSIT_RATE = Decimal("0.5")


@dataclass(frozen=True)
class ContractAmounts:
    services_total: Decimal
    store_total: Decimal
    travel: Decimal
    total_amount: Decimal
    deposit_amount: Decimal
    remaining_amount: Decimal

    def as_dict(self) -> dict:
        return asdict(self)


def read_field(source, *names):
    # Acepta instancias del modelo y documentos importados (snake_case o camelCase)
    for name in names:
        if isinstance(source, dict):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


def _as_list(value) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def service_items(contract) -> list:
    """Servicios del contrato; si no hay, los del carrito guardado en el formulario."""
    items = _as_list(read_field(contract, "services"))
    if items:
        return items
    snapshot = read_field(contract, "form_snapshot", "formSnapshot")
    if isinstance(snapshot, dict):
        return _as_list(snapshot.get("cartItems"))
    return []


def services_subtotal(items) -> Decimal:
    total = ZERO
    for item in items:
        quantity = read_field(item, "quantity")
        quantity = Decimal(1) if quantity is None else to_decimal(quantity)
        total += Decimal(digits_to_int(read_field(item, "price"))) * quantity
    return total


def store_subtotal(items) -> Decimal:
    total = ZERO
    for item in items:
        # cantidad 0 o vacía cuenta como 1
        quantity = to_decimal(read_field(item, "quantity")) or Decimal(1)
        total += to_decimal(read_field(item, "price")) * quantity
    return total


def compute_amounts(contract) -> ContractAmounts:
    services_raw = services_subtotal(service_items(contract))
    store_total = store_subtotal(_as_list(read_field(contract, "store_items", "storeItems")))
    travel = to_decimal(read_field(contract, "travel_fee", "travelFee"))

    services_total = services_raw
    persisted_total = read_field(contract, "total_amount", "totalAmount")
    if services_raw == 0 and persisted_total is not None:
        # paquete cerrado guardado sólo como total
        services_total = max(ZERO, to_decimal(persisted_total) - store_total - travel)

    total_amount = round_units(services_total + store_total + travel)

    if services_total <= 0 and store_total > 0:
        deposit_amount = ceil_units((store_total + travel) * STORE_DEPOSIT_RATE)
    else:
        deposit_amount = ceil_units(services_total * SERVICE_DEPOSIT_RATE + store_total * STORE_DEPOSIT_RATE)

    if total_amount >= 0 and deposit_amount > total_amount:
        deposit_amount = total_amount

    remaining_amount = max(ZERO, round_units(total_amount - deposit_amount))

    return ContractAmounts(
        services_total=services_total,
        store_total=store_total,
        travel=travel,
        total_amount=total_amount,
        deposit_amount=deposit_amount,
        remaining_amount=remaining_amount,
    )
