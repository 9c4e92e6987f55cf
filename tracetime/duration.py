"""Duration formatting for span timings.

All durations are in microseconds. ``format_duration`` is the general
purpose humanizer; the single-unit helpers render a fixed unit at
millisecond resolution.

Example:
    >>> from tracetime import format_duration
    >>> format_duration(5_000_000)
    '5s'
    >>> format_duration(183_840_000_000)
    '2d 3h'
"""

import math

from tracetime.number import (
    format_number,
    round_half_up,
    round_to_integer,
    to_fixed_int,
    to_float_precision,
)
from tracetime.units import UNIT_STEPS, UnitStep
from tracetime.util import DEFAULT_MS_PRECISION, ONE_MILLISECOND, ONE_SECOND


def get_percentage_of_duration(duration: float, total_duration: float) -> float:
    """Return ``duration`` as a percentage of ``total_duration``.

    The result is not clamped to 0-100. A zero total yields ``nan`` or a
    signed infinity instead of raising.
    """
    try:
        return duration / total_duration * 100
    except ZeroDivisionError:
        if duration == 0 or math.isnan(duration):
            return math.nan
        return math.copysign(math.inf, duration) * math.copysign(1, total_duration)


def quantize_duration(
    duration: float, float_precision: int, conversion_factor: float
) -> float:
    """Round ``duration`` to ``float_precision`` decimals of ``conversion_factor`` units."""
    return (
        to_float_precision(duration / conversion_factor, float_precision)
        * conversion_factor
    )


def format_millisecond_time(duration: float) -> str:
    """Format a duration in milliseconds, e.g. ``"12ms"``."""
    target = quantize_duration(duration, DEFAULT_MS_PRECISION, ONE_MILLISECOND)
    return f"{format_number(target / ONE_MILLISECOND)}ms"


def format_second_time(duration: float) -> str:
    """Format a duration in seconds, e.g. ``"3s"``."""
    target = quantize_duration(duration, DEFAULT_MS_PRECISION, ONE_SECOND)
    return f"{format_number(target / ONE_SECOND)}s"


def unit_window(duration: float) -> tuple[UnitStep, UnitStep | None]:
    """Pick the display unit for ``duration`` and the next smaller unit.

    The primary unit is the largest one whose scale does not exceed the
    duration. Durations below the smallest scale fall back to the two
    smallest units. The microsecond unit has no smaller neighbour.
    """
    smallest = UNIT_STEPS[-1]
    if duration < smallest.microseconds:
        return UNIT_STEPS[-2], smallest

    for index, step in enumerate(UNIT_STEPS[:-1]):
        if step.microseconds <= duration:
            return step, UNIT_STEPS[index + 1]
    return smallest, None


def format_duration(duration: float) -> str:
    """
    Humanize a duration for display.

    Sub-minute durations are shown as one decimal number rounded to two
    places. Longer ones are shown as a whole number of the primary unit
    followed by the rounded remainder in the next smaller unit, which is
    omitted when it rounds to zero. The remainder is not clamped, so
    1 hour 59.6 minutes renders as ``"1h 60m"``.

    Negative durations render as the negated magnitude.

    Args:
        duration: Duration in microseconds

    Returns:
        Formatted duration

    Example:
        >>> format_duration(1000)
        '1ms'
        >>> format_duration(1_500_000)
        '1.5s'
        >>> format_duration(183_840_000_000)
        '2d 3h'
    """
    if not math.isfinite(duration):
        return f"{format_number(duration)}{UNIT_STEPS[-1].unit}"
    if duration < 0:
        return f"-{format_duration(-duration)}"

    primary, secondary = unit_window(duration)
    if primary.is_decimal or secondary is None:
        value = round_half_up(duration / primary.microseconds, 2)
        return f"{format_number(value)}{primary.unit}"

    primary_value = math.floor(duration / primary.microseconds)
    primary_text = f"{format_number(primary_value)}{primary.unit}"
    secondary_value = round_to_integer(
        (duration / secondary.microseconds) % primary.of_previous
    )
    if secondary_value == 0:
        return primary_text
    return f"{primary_text} {format_number(secondary_value)}{secondary.unit}"


def time_conversion(microseconds: float) -> str:
    """Humanize a duration using whole-number buckets.

    Older display code depends on this exact output ("500ms", "2Sec",
    "3Min", "4Hrs", "2Days"), which differs from ``format_duration``.
    Each bucket value is rounded to two decimals and then truncated.
    """
    milliseconds = to_fixed_int(microseconds / 1000)
    seconds = to_fixed_int(milliseconds / 1000)
    minutes = to_fixed_int(milliseconds / (1000 * 60))
    hours = to_fixed_int(milliseconds / (1000 * 60 * 60))
    days = to_fixed_int(milliseconds / (1000 * 60 * 60 * 24))

    if microseconds < 1000:
        return f"{format_number(microseconds)}μs"
    elif milliseconds < 1000:
        return f"{format_number(milliseconds)}ms"
    elif seconds < 60:
        return f"{format_number(seconds)}Sec"
    elif minutes < 60:
        return f"{format_number(minutes)}Min"
    elif hours < 24:
        return f"{format_number(hours)}Hrs"
    return f"{format_number(days)}Days"
