from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_tz
from typing import Optional

from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant
from zoned_date.ports.host import HostDatePort

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# "Mon Mar 01 2021 12:00:00 GMT+0100 (CET)", as produced by to_string below.
_TO_STRING_PATTERN = re.compile(
    r"^(?:[A-Za-z]{3} )?([A-Za-z]{3}) ([0-9]{1,2}) (-?[0-9]+) "
    r"([0-9]{2}):([0-9]{2})(?::([0-9]{2}))? GMT([+-])([0-9]{2})([0-9]{2})(?: \(.*\))?$"
)


class SystemHost(HostDatePort):
    """Host behaviour taken from the interpreter's local time zone."""

    def now(self) -> int:
        return int(datetime.now(timezone.utc).timestamp() * 1000)

    def timezone_offset(self, instant: UtcInstant) -> float:
        if not instant.is_valid():
            return calendar.INVALID_TIME
        local = self._local_datetime(instant) or datetime.now(timezone.utc).astimezone()
        return -round(local.utcoffset().total_seconds() / 60)

    def to_string(self, instant: UtcInstant) -> str:
        if not instant.is_valid():
            return "Invalid Date"
        offset = self.timezone_offset(instant)
        local = UtcInstant(ms=instant.get_time() - offset * calendar.MS_PER_MINUTE)
        moment = self._local_datetime(instant)
        abbreviation = moment.tzname() if moment is not None else None
        sign = "-" if offset > 0 else "+"
        magnitude = abs(offset)
        text = (
            f"{calendar.WEEKDAY_NAMES[local.get_utc_day()]} {calendar.MONTH_NAMES[local.get_utc_month()]} "
            f"{local.get_utc_date():02d} {local.get_utc_full_year():04d} "
            f"{local.get_utc_hours():02d}:{local.get_utc_minutes():02d}:{local.get_utc_seconds():02d} "
            f"GMT{sign}{magnitude // 60:02d}{magnitude % 60:02d}"
        )
        return f"{text} ({abbreviation})" if abbreviation else text

    def parse(self, text: str) -> float:
        match = _TO_STRING_PATTERN.match(text.strip())
        if match:
            return self._from_to_string(match)
        parts = parsedate_tz(text)
        if parts is None:
            logger.debug("Host parser cannot read %r", text)
            return calendar.INVALID_TIME
        year, month, day, hour, minute, second = parts[:6]
        value = calendar.time_clip(calendar.make_date(
            calendar.make_day(year, month - 1, day), calendar.make_time(hour, minute, second, 0)
        ))
        # parsedate_tz reports a missing zone as +0000.
        return calendar.time_clip(value - parts[9] * calendar.MS_PER_SECOND)

    # Helpers -----------------------------------------------------------------

    def _from_to_string(self, match: re.Match) -> float:
        month_name, day, year, hour, minute, second, sign, off_hours, off_minutes = match.groups()
        if month_name.title() not in calendar.MONTH_NAMES:
            return calendar.INVALID_TIME
        month = calendar.MONTH_NAMES.index(month_name.title())
        value = calendar.time_clip(calendar.make_date(
            calendar.make_day(int(year), month, int(day)),
            calendar.make_time(int(hour), int(minute), int(second or 0), 0),
        ))
        shift = (int(off_hours) * 60 + int(off_minutes)) * calendar.MS_PER_MINUTE
        return calendar.time_clip(value - shift if sign == "+" else value + shift)

    @staticmethod
    def _local_datetime(instant: UtcInstant) -> Optional[datetime]:
        try:
            return (_EPOCH + timedelta(milliseconds=instant.get_time())).astimezone()
        except (OverflowError, ValueError, OSError) as e:
            logger.debug("Host time zone unavailable for %s: %s", instant.get_time(), e)
            return None
