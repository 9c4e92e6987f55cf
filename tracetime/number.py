"""Numeric rounding and rendering primitives.

Trace timings arrive as floats and are shown to users as short decimal
strings, so the helpers here pin down exactly how a value is rounded and
how it is printed.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

# Floats carry at most 17 significant digits; rounding beyond that is a no-op
_MAX_SIGNIFICANT_DIGITS = 17

# Magnitude at which every float is already an integer
_INTEGRAL_FLOAT = 2**53


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimal places, halves away from zero.

    Rounding works on the shortest decimal representation of ``value``,
    so ``round_half_up(1.005, 2)`` gives ``1.01`` even though the binary
    float is slightly below the half.
    """
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_FLOAT:
        return float(value)
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_integer(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    floored = math.floor(value)
    return floored + 1 if value - floored >= 0.5 else floored


def to_float_precision(value: float, precision: int) -> float:
    """Keep ``precision`` decimal places of ``value``.

    The value is rounded to ``precision`` plus its integer digit count
    significant digits. When that leaves no significant digit at all
    (zero, or magnitudes below ``10 ** -precision``) the value is
    truncated toward zero instead.

    Args:
        value: Number to round
        precision: Decimal places to keep

    Returns:
        The rounded value as a float
    """
    if not math.isfinite(value):
        return float(value)
    if value == 0:
        return 0.0

    integer_digits = math.floor(math.log10(abs(value))) + 1
    target = precision + integer_digits
    if target <= 0:
        return float(math.trunc(value))
    if target >= _MAX_SIGNIFICANT_DIGITS:
        return float(value)

    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def to_fixed_int(value: float, digits: int = 2) -> int | float:
    """Round to ``digits`` decimals on the exact binary value, then drop the fraction.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    if abs(value) >= _INTEGRAL_FLOAT:
        return int(value)
    quantum = Decimal(1).scaleb(-digits)
    return int(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Render a number the way a JavaScript template string would.

    Integral values print without a fractional part (``5.0`` -> ``"5"``),
    other values in their shortest round-trip form. Exponent notation is
    only used below ``1e-6`` and from ``1e21`` upward.

    Example:
        >>> format_number(1.5)
        '1.5'
        >>> format_number(1e-05)
        '0.00001'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(float(value))
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"
