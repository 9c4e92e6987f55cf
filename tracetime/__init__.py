from .dates import (
    INVALID_DATE,
    TODAY,
    YESTERDAY,
    format_date,
    format_datetime,
    format_pattern,
    format_relative_date,
    format_time,
    to_datetime,
)
from .duration import (
    format_duration,
    format_millisecond_time,
    format_second_time,
    get_percentage_of_duration,
    quantize_duration,
    time_conversion,
    unit_window,
)
from .units import UNIT_STEPS, UnitStep
from .util import (
    DEFAULT_MS_PRECISION,
    ONE_DAY,
    ONE_HOUR,
    ONE_MILLISECOND,
    ONE_MINUTE,
    ONE_SECOND,
    STANDARD_DATE_FORMAT,
    STANDARD_DATETIME_FORMAT,
    STANDARD_TIME_FORMAT,
)

__all__ = [
    "format_duration",
    "format_millisecond_time",
    "format_second_time",
    "get_percentage_of_duration",
    "quantize_duration",
    "time_conversion",
    "unit_window",
    "format_date",
    "format_time",
    "format_datetime",
    "format_pattern",
    "format_relative_date",
    "to_datetime",
    "TODAY",
    "YESTERDAY",
    "INVALID_DATE",
    "UnitStep",
    "UNIT_STEPS",
    "ONE_MILLISECOND",
    "ONE_SECOND",
    "ONE_MINUTE",
    "ONE_HOUR",
    "ONE_DAY",
    "DEFAULT_MS_PRECISION",
    "STANDARD_DATE_FORMAT",
    "STANDARD_TIME_FORMAT",
    "STANDARD_DATETIME_FORMAT",
]
