import math
from decimal import Context, Decimal, ROUND_HALF_UP

# Small constant to prevent division by zero
EPSILON = 1e-7

_FORMAT_CONTEXT = Context(prec=400)


def guard_zero(value: float) -> float:
    """ Replace an exact zero by EPSILON so the value can be used as a divisor. """
    return EPSILON if value == 0 else value


def safe_divide(numerator: float, denominator: float) -> float:
    return numerator / guard_zero(denominator)


def to_fixed(value: float, digits: int = 2) -> str:
    """
    Formats a number with a fixed amount of decimals.

    Ties are rounded away from zero on the exact binary value of the float, so
    2.5 becomes "3" and 0.125 becomes "0.13" (unlike the half-to-even rounding
    of ``format``).
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")

    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT)
    return format(rounded, 'f')


def round_half_up(value: float) -> int:
    return int(to_fixed(value, 0))
