"""Tests for duration formatting."""

import math
import re

import pytest

from tracetime import (
    ONE_DAY,
    ONE_HOUR,
    ONE_MILLISECOND,
    ONE_MINUTE,
    ONE_SECOND,
    format_duration,
    format_millisecond_time,
    format_second_time,
    get_percentage_of_duration,
    quantize_duration,
    time_conversion,
)

_UNIT_SCALES = {
    "d": ONE_DAY,
    "h": ONE_HOUR,
    "m": ONE_MINUTE,
    "s": ONE_SECOND,
    "ms": ONE_MILLISECOND,
    "μs": 1,
}


def _parse_duration(text: str) -> float:
    """Read a format_duration string back into microseconds."""
    total = 0.0
    for value, unit in re.findall(r"([\d.]+)(ms|μs|d|h|m|s)", text):
        total += float(value) * _UNIT_SCALES[unit]
    return total


@pytest.mark.parametrize(
    "duration, expected",
    [
        (0, "0ms"),
        (1000, "1ms"),
        (5_000_000, "5s"),
        (183_840_000_000, "2d 3h"),
    ],
)
def test_format_duration_documented_examples(duration, expected):
    """Test the canonical humanized durations."""
    assert format_duration(duration) == expected


def test_format_duration_decimal_units():
    """Test that sub-minute durations render as one rounded decimal."""
    assert format_duration(1_500_000) == "1.5s"
    assert format_duration(1_234_567) == "1.23s"
    assert format_duration(12_345) == "12.35ms"
    assert format_duration(999) == "999μs"


def test_format_duration_rounds_halves_up():
    """Test that halves at the second decimal round away from zero."""
    # 1.235 is stored slightly below the half but still rounds up
    assert format_duration(1_235_000) == "1.24s"
    assert format_duration(1_005_000) == "1.01s"


def test_format_duration_below_smallest_unit():
    """Test that sub-microsecond durations fall back to milliseconds."""
    assert format_duration(0.5) == "0ms"
    assert format_duration(1) == "1μs"


def test_format_duration_compound_units():
    """Test primary plus secondary unit rendering."""
    assert format_duration(90 * ONE_SECOND) == "1m 30s"
    assert format_duration(ONE_HOUR + 15 * ONE_MINUTE) == "1h 15m"
    assert format_duration(ONE_DAY + 5 * ONE_HOUR) == "1d 5h"


def test_format_duration_omits_zero_secondary():
    """Test that a remainder rounding to zero is left out."""
    assert format_duration(ONE_MINUTE) == "1m"
    assert format_duration(ONE_HOUR) == "1h"
    assert format_duration(ONE_DAY) == "1d"

    # 20 seconds is a third of a minute, which rounds to 0m
    assert format_duration(ONE_HOUR + 20 * ONE_SECOND) == "1h"


def test_format_duration_floors_primary_unit():
    """Test that the primary value is floored, not rounded."""
    # 1m 59.4s: primary stays at 1 minute
    assert format_duration(119_400_000) == "1m 59s"


def test_format_duration_secondary_is_not_clamped():
    """Test that the remainder may round up to a full primary unit."""
    # 1 hour and 59.6 minutes
    assert format_duration(ONE_HOUR + 59.6 * ONE_MINUTE) == "1h 60m"
    assert format_duration(23 * ONE_HOUR + 59.6 * ONE_MINUTE) == "23h 60m"


def test_format_duration_negative_mirrors_sign():
    """Test that negative durations render as the negated magnitude."""
    assert format_duration(-5_000_000) == "-5s"
    assert format_duration(-183_840_000_000) == "-2d 3h"


def test_format_duration_non_finite():
    """Test that non-finite input renders without raising."""
    assert format_duration(math.nan) == "NaNμs"
    assert format_duration(math.inf) == "Infinityμs"


def test_format_duration_huge_values_use_exponent_form():
    """Test that compound values render like decimal ones for huge durations."""
    text = format_duration(1e32)

    assert text.startswith("1.15740740740740")
    assert "e+21d" in text
    assert re.search(r"\d{22}", text) is None


def test_format_duration_is_monotonic():
    """Test that larger durations never render as smaller magnitudes."""
    durations = [
        0,
        1,
        999,
        1000,
        999_994,
        999_996,
        ONE_SECOND,
        59_994_000,
        59_996_000,
        ONE_MINUTE,
        90 * ONE_SECOND,
        3_599 * ONE_SECOND,
        ONE_HOUR,
        ONE_HOUR + 59.6 * ONE_MINUTE,
        86_399 * ONE_SECOND,
        ONE_DAY,
        183_840_000_000,
        30 * ONE_DAY,
    ]

    magnitudes = [_parse_duration(format_duration(d)) for d in durations]

    assert magnitudes == sorted(magnitudes)


def test_format_millisecond_time():
    """Test millisecond rendering at microsecond-of-a-millisecond precision."""
    assert format_millisecond_time(12_000) == "12ms"
    assert format_millisecond_time(1_500) == "1.5ms"
    assert format_millisecond_time(1_234.5) == "1.234ms"
    assert format_millisecond_time(0) == "0ms"


def test_format_millisecond_time_truncates_tiny_values():
    """Test that values below the kept precision truncate to zero."""
    assert format_millisecond_time(0.4) == "0ms"
    assert format_millisecond_time(0.6) == "0ms"


def test_format_second_time():
    """Test second rendering at millisecond precision."""
    assert format_second_time(3_000_000) == "3s"
    assert format_second_time(1_500_000) == "1.5s"
    assert format_second_time(1_234_567) == "1.235s"


@pytest.mark.parametrize(
    "value",
    [0, 0.4, 1_234.5, 12_000, 987_654.321, 1_234_567, 183_840_000_000],
)
def test_quantize_duration_is_idempotent(value):
    """Test that quantizing an already quantized value changes nothing."""
    for factor in (ONE_MILLISECOND, ONE_SECOND):
        once = quantize_duration(value, 3, factor)
        assert quantize_duration(once, 3, factor) == once


def test_get_percentage_of_duration():
    """Test percentage of a total duration."""
    assert get_percentage_of_duration(25, 200) == 12.5
    assert get_percentage_of_duration(200, 200) == 100
    assert get_percentage_of_duration(0, 200) == 0


def test_get_percentage_of_duration_is_unclamped():
    """Test that durations beyond the total exceed 100 percent."""
    assert get_percentage_of_duration(300, 200) == 150
    assert get_percentage_of_duration(-50, 200) == -25


def test_get_percentage_of_duration_zero_total():
    """Test that a zero total yields nan or infinity instead of raising."""
    assert math.isnan(get_percentage_of_duration(0, 0))
    assert get_percentage_of_duration(5, 0) == math.inf
    assert get_percentage_of_duration(-5, 0) == -math.inf


@pytest.mark.parametrize(
    "microseconds, expected",
    [
        (500, "500μs"),
        (500.5, "500.5μs"),
        (1_500, "1ms"),
        (2_500_000, "2Sec"),
        (90 * ONE_SECOND, "1Min"),
        (2 * ONE_HOUR, "2Hrs"),
        (3 * ONE_DAY, "3Days"),
    ],
)
def test_time_conversion_buckets(microseconds, expected):
    """Test the legacy whole-number bucket humanizer."""
    assert time_conversion(microseconds) == expected


def test_time_conversion_rounds_before_truncating():
    """Test that bucket values round to two decimals before truncation."""
    # 999.999ms rounds to 1000.00ms, which lands in the seconds bucket
    assert time_conversion(999_999) == "1Sec"


def test_time_conversion_differs_from_format_duration():
    """Test that the legacy humanizer keeps its own output format."""
    assert time_conversion(90 * ONE_SECOND) == "1Min"
    assert format_duration(90 * ONE_SECOND) == "1m 30s"
