"""Proleptic Gregorian arithmetic over epoch milliseconds.

Every function accepts and returns plain numbers. A time value is an ``int``
count of milliseconds since 1970-01-01T00:00:00Z, or ``math.nan`` when the date
is invalid. Non-finite inputs propagate as ``math.nan`` instead of raising.
Months are zero-based and weekdays start at Sunday (0).
"""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

INVALID_TIME = math.nan
MAX_TIME = 8.64e15

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAYS_IN_MONTH = (-1, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = [-1]
_running = 0
for _days in _DAYS_IN_MONTH[1:]:
    _DAYS_BEFORE_MONTH.append(_running)
    _running += _days
del _running, _days


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_before_year(year: int) -> int:
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _ymd2ord(year: int, month: int, day: int) -> int:
    """year, month (1-12), day -> ordinal, considering 01-Jan-0001 as day 1."""
    return _days_before_year(year) + _DAYS_BEFORE_MONTH[month] + (month > 2 and is_leap(year)) + day


_DI400Y = _days_before_year(401)
_DI100Y = _days_before_year(101)
_DI4Y = _days_before_year(5)
_EPOCH_ORDINAL = _ymd2ord(1970, 1, 1)


def _ord2ymd(n: int) -> Tuple[int, int, int]:
    """ordinal -> (year, month (1-12), day); works for ordinals before 0001 too."""
    n -= 1
    n400, n = divmod(n, _DI400Y)
    year = n400 * 400 + 1
    n100, n = divmod(n, _DI100Y)
    n4, n = divmod(n, _DI4Y)
    n1, n = divmod(n, 365)
    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31
    leapyear = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leapyear)
    if preceding > n:
        month -= 1
        preceding -= _DAYS_IN_MONTH[month] + (month == 2 and leapyear)
    return year, month, n - preceding + 1


# Coercion -----------------------------------------------------------------


def is_finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def to_number(value: Any) -> float:
    """Numeric value of ``value``; ``nan`` when it has none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return _string_to_number(value.strip())
    return INVALID_TIME


def _string_to_number(text: str) -> float:
    # Only decimal literals, 0x/0o/0b integers and "Infinity" are numbers;
    # float() also takes "1_000", "inf" and "nan", which are not.
    if not text:
        return 0
    if "_" in text:
        return INVALID_TIME
    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            return int(text, 0)
        except ValueError:
            return INVALID_TIME
    unsigned = text[1:] if text[0] in "+-" else text
    if unsigned == "Infinity":
        return -math.inf if text[0] == "-" else math.inf
    if unsigned[:1] not in tuple("0123456789."):
        return INVALID_TIME
    try:
        return float(text)
    except ValueError:
        return INVALID_TIME


def to_integer(value: Any) -> float:
    """Truncate toward zero, keeping ``nan`` and infinities."""
    number = to_number(value)
    if not is_finite(number):
        return number
    return int(number)


# Composition ---------------------------------------------------------------


def make_time(hours: Any, minutes: Any, seconds: Any, ms: Any) -> float:
    parts = [to_integer(v) for v in (hours, minutes, seconds, ms)]
    if not all(is_finite(p) for p in parts):
        return INVALID_TIME
    h, m, s, milli = parts
    return h * MS_PER_HOUR + m * MS_PER_MINUTE + s * MS_PER_SECOND + milli


def make_day(year: Any, month: Any, date: Any) -> float:
    """Days since the epoch; months outside 0-11 roll into neighbouring years."""
    parts = [to_integer(v) for v in (year, month, date)]
    if not all(is_finite(p) for p in parts):
        return INVALID_TIME
    y, m, d = parts
    ym = y + m // 12
    mn = m % 12
    return _ymd2ord(ym, mn + 1, 1) - _EPOCH_ORDINAL + d - 1


def make_date(day: float, time: float) -> float:
    if not (is_finite(day) and is_finite(time)):
        return INVALID_TIME
    return day * MS_PER_DAY + time


def time_clip(time: Any) -> float:
    if not is_finite(time) or abs(time) > MAX_TIME:
        return INVALID_TIME
    return int(time)


def utc(
    year: Any = INVALID_TIME,
    month: Any = 0,
    date: Any = 1,
    hours: Any = 0,
    minutes: Any = 0,
    seconds: Any = 0,
    ms: Any = 0,
) -> float:
    """Compose a UTC time value from calendar fields.

    Field overflow and underflow normalize (month 12 is January of the next
    year, day 0 is the last day of the previous month). Years 0 through 99
    mean 1900 through 1999.
    Without a year the result is ``nan``.
    """
    y = to_number(year)
    if is_finite(y) and 0 <= int(y) <= 99:
        y = 1900 + int(y)
    return time_clip(make_date(make_day(y, month, date), make_time(hours, minutes, seconds, ms)))


# Decomposition -------------------------------------------------------------


def day_number(t: float) -> float:
    return t // MS_PER_DAY if is_finite(t) else INVALID_TIME


def time_within_day(t: float) -> float:
    return t % MS_PER_DAY if is_finite(t) else INVALID_TIME


def ymd_from_time(t: float) -> Optional[Tuple[int, int, int]]:
    """(year, zero-based month, day of month) for ``t``; ``None`` if invalid."""
    if not is_finite(t):
        return None
    year, month, day = _ord2ymd(int(t // MS_PER_DAY) + _EPOCH_ORDINAL)
    return year, month - 1, day


def year_from_time(t: float) -> float:
    ymd = ymd_from_time(t)
    return ymd[0] if ymd else INVALID_TIME


def month_from_time(t: float) -> float:
    ymd = ymd_from_time(t)
    return ymd[1] if ymd else INVALID_TIME


def date_from_time(t: float) -> float:
    ymd = ymd_from_time(t)
    return ymd[2] if ymd else INVALID_TIME


def week_day(t: float) -> float:
    return int((t // MS_PER_DAY + 4) % 7) if is_finite(t) else INVALID_TIME


def hour_from_time(t: float) -> float:
    return int((t // MS_PER_HOUR) % 24) if is_finite(t) else INVALID_TIME


def min_from_time(t: float) -> float:
    return int((t // MS_PER_MINUTE) % 60) if is_finite(t) else INVALID_TIME


def sec_from_time(t: float) -> float:
    return int((t // MS_PER_SECOND) % 60) if is_finite(t) else INVALID_TIME


def ms_from_time(t: float) -> float:
    return int(t % MS_PER_SECOND) if is_finite(t) else INVALID_TIME
