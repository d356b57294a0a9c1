import logging
import re
from decimal import ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_EVEN, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
UNIT = Decimal("1")
CENT = Decimal("0.01")

_NON_DIGITS = re.compile(r"[^0-9]")


def to_decimal(value) -> Decimal:
    """
    Convierte cualquier valor numérico a Decimal.
    Valores vacíos o inválidos se tratan como 0 (no se lanza excepción).
    """
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            logger.debug("Valor monetario inválido %r, se usa 0", value)
            return ZERO
    if not result.is_finite():
        return ZERO
    return result


def digits_to_int(text) -> int:
    # "R$ 1.200,00" -> 120000
    digits = _NON_DIGITS.sub("", str(text or ""))
    return int(digits) if digits else 0


def round_units(amount: Decimal) -> Decimal:
    return to_decimal(amount).quantize(UNIT, rounding=ROUND_HALF_EVEN)


def ceil_units(amount: Decimal) -> Decimal:
    return to_decimal(amount).quantize(UNIT, rounding=ROUND_CEILING)


def quantize_cents(amount: Decimal) -> Decimal:
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_EVEN)


def to_cents(amount) -> int:
    return int((to_decimal(amount) * 100).quantize(UNIT, rounding=ROUND_HALF_EVEN))


def floor_cents(amount) -> int:
    return int((to_decimal(amount) * 100).quantize(UNIT, rounding=ROUND_FLOOR))


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(CENT)
