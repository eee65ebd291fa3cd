"""
Time formatting — метки времени и длительности
"""

import calendar
from datetime import datetime
from typing import Final, Optional

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import validate_in_range, validate_int, validate_non_negative

TIMESTAMP_FORMAT: Final[str] = "%Y%m%d_%H%M%S"


def timestamp(now: Optional[datetime] = None) -> str:
    """
    Метка времени YYYYMMDD_HHMMSS (локальное время, если now не задан).

    Examples:
        >>> timestamp(datetime(2024, 3, 7, 9, 5, 1))
        '20240307_090501'
    """
    if now is None:
        now = datetime.now()
    elif not isinstance(now, datetime):
        raise InvalidArgumentError(f"now must be a datetime, got {type(now).__name__}")
    return now.strftime(TIMESTAMP_FORMAT)


def seconds_to_hms(seconds: float) -> tuple[int, int, int]:
    """Разложение на (часы, минуты, секунды); дробная часть отбрасывается."""
    total = int(validate_non_negative(seconds, "seconds"))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return hours, minutes, secs


def format_duration(seconds: float) -> str:
    """
    HH:MM:SS; часы не ограничены 24.

    Examples:
        >>> format_duration(3725)
        '01:02:05'
    """
    h, m, s = seconds_to_hms(seconds)
    return f"{h:02d}:{m:02d}:{s:02d}"


def is_leap_year(year: int) -> bool:
    return calendar.isleap(validate_int(year, "year"))


def days_in_month(year: int, month: int) -> int:
    y = validate_int(year, "year", min_value=1)
    m = validate_int(month, "month")
    validate_in_range(m, "month", 1, 12)
    return calendar.monthrange(y, m)[1]
