"""Numbers in zipette. Every value is a 64-bit float; this module holds the conversions between source text, floats and
printed text, and the arithmetic that Python floats do not already carry out with IEEE semantics (division, powers,
bit shifts).
"""

import math
from decimal import Decimal

U64_MAX = 2 ** 64 - 1


def to_float(text):
    """Returns float value of a numeric literal. Accepts ',' as decimal separator. Raises ValueError if text is not a
    number.
    """
    return float(text.replace(",", "."))


def number(value):
    """Returns the printed form of value: integral values have no fractional part, other values use the shortest
    round-trip digits and never exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    elif math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def divide(left, right):
    """IEEE division: dividing by zero gives a signed infinity, or nan for 0/0."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    sign = math.copysign(1, left) * math.copysign(1, right)
    return math.copysign(math.inf, sign)


def _is_odd_integer(value):
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def power(base, exponent):
    """Real power with IEEE results instead of exceptions (or complex numbers)."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return -math.inf if base < 0 and _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:  # zero to a negative power
            negative = math.copysign(1, base) < 0 and _is_odd_integer(exponent)
            return -math.inf if negative else math.inf
        return math.nan


def to_u64(value):
    """Saturating cast to an unsigned 64-bit integer: fraction truncated, nan and negatives give 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= U64_MAX:
        return U64_MAX
    return int(value)


def shift_left(left, right):
    """left << right on unsigned 64-bit integers. Bits shifted past 64 are lost; a shift of 64 or more gives 0."""
    amount = to_u64(right)
    if amount >= 64:
        return 0.0
    return float((to_u64(left) << amount) & U64_MAX)


def shift_right(left, right):
    """left >> right on unsigned 64-bit integers; a shift of 64 or more gives 0."""
    amount = to_u64(right)
    if amount >= 64:
        return 0.0
    return float(to_u64(left) >> amount)
