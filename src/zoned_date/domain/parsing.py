"""Parser for the ISO-8601 subset ``YYYY[-MM[-DD]][THH[:mm[:ss[.sss]]]][Z|±HH:mm]``."""

from __future__ import annotations

import logging
import re
from typing import Optional

from zoned_date.domain import calendar

logger = logging.getLogger(__name__)

_DATE_TIME_PATTERN = re.compile(
    r"([+-]?[0-9]{4,})(?:-([0-9]{2})(?:-([0-9]{2}))?)?"
    r"(?:T([0-9]{2})(?::([0-9]{2})(?::([0-9]{2})(?:\.([0-9]{3}))?)?)?)?"
    r"(Z|[+-][0-9:]*)?"
)
_OFFSET_PATTERN = re.compile(r"([+-])([0-9]{2}):([0-9]{2})")


def parse_iso(text: str) -> Optional[float]:
    """Parse ``text`` as a UTC time value.

    Returns ``None`` when the text is not in the subset at all, so the caller
    can try another parser. A text that matches but carries a malformed offset
    suffix yields ``calendar.INVALID_TIME`` rather than ``None``.
    """
    match = _DATE_TIME_PATTERN.fullmatch(text)
    if not match:
        return None
    year, month, day, hour, minute, second, milli, suffix = match.groups()
    value = calendar.utc(
        int(year),
        int(month or 1) - 1,
        int(day or 1),
        int(hour or 0),
        int(minute or 0),
        int(second or 0),
        int(milli or 0),
    )
    if suffix and suffix != "Z":
        offset = _OFFSET_PATTERN.fullmatch(suffix)
        if not offset:
            logger.debug("Rejecting %r: malformed offset suffix %r", text, suffix)
            return calendar.INVALID_TIME
        sign, hours, minutes = offset.groups()
        shift = (int(hours) * 60 + int(minutes)) * calendar.MS_PER_MINUTE
        value = calendar.time_clip(value - shift if sign == "+" else value + shift)
    return value
