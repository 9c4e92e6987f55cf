"""Utility constants for tracetime.

Time unit constants represent durations in microseconds, the resolution
tracing backends report span timestamps and durations in.
"""

import math

# Time unit constants (all values in microseconds)
ONE_MILLISECOND = 1000
ONE_SECOND = 1000 * ONE_MILLISECOND
ONE_MINUTE = 60 * ONE_SECOND
ONE_HOUR = 60 * ONE_MINUTE
ONE_DAY = 24 * ONE_HOUR

# Decimal places kept when quantizing to millisecond resolution
DEFAULT_MS_PRECISION = int(math.log10(ONE_MILLISECOND))

# strftime patterns; {day} is the unpadded day of month, {millis} the
# zero-padded milliseconds
STANDARD_DATE_FORMAT = "%Y-%m-%d"
STANDARD_TIME_FORMAT = "%H:%M"
STANDARD_DATETIME_FORMAT = "%B {day} %Y, %H:%M:%S.{millis}"
