from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.zone import ZoneOffset
from zoned_date.ports.zone_provider import ZoneInfoProviderPort

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ZoneinfoProvider(ZoneInfoProviderPort):
    """Zone provider backed by the IANA database through :mod:`zoneinfo`.

    Local readings are resolved with ``fold=0``: a time inside a spring-forward
    gap gets the offset in force before the gap, and a repeated time during a
    fall-back overlap gets its first (pre-transition) offset.
    """

    def get_tz_info(self, instant: UtcInstant, zone_id: str, is_utc: bool) -> Optional[ZoneOffset]:
        if not instant.is_valid():
            return None
        try:
            zone = ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            logger.debug("Unknown zone %r: %s", zone_id, e)
            return None
        try:
            if is_utc:
                moment = (_EPOCH + timedelta(milliseconds=instant.get_time())).astimezone(zone)
            else:
                moment = datetime(
                    instant.get_utc_full_year(),
                    instant.get_utc_month() + 1,
                    instant.get_utc_date(),
                    instant.get_utc_hours(),
                    instant.get_utc_minutes(),
                    instant.get_utc_seconds(),
                    instant.get_utc_milliseconds() * 1000,
                    tzinfo=zone,
                )
            offset = moment.utcoffset()
        except (OverflowError, ValueError) as e:
            logger.debug("Instant %s outside the range of zone %r: %s", instant.get_time(), zone_id, e)
            return None
        return ZoneOffset(
            offset_minutes=-round(offset.total_seconds() / 60),
            abbreviation=moment.tzname() or zone_id,
        )
