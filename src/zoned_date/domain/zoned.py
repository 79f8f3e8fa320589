from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.zone import (
    LocalProjection,
    ResolvedZone,
    UnresolvedZone,
    ZoneOffset,
    ZoneTag,
    zone_id_of,
)
from zoned_date.ports.host import HostDatePort
from zoned_date.ports.zone_provider import ZoneInfoProviderPort

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid Date"


def convert_from_local(
    local: UtcInstant,
    zone_id: Optional[str],
    provider: ZoneInfoProviderPort,
    host: HostDatePort,
) -> Tuple[UtcInstant, ZoneTag]:
    """Turn a wall-clock reading in ``zone_id`` into the matching UTC instant.

    ``local`` carries the wall-clock fields in its UTC fields. The zone is
    resolved once, at the local reading itself; there is no second pass near
    transitions. Without a zone id, or when the provider cannot resolve it,
    the host offset is used.

    The returned tag holds the offset resolved at the local reading. Inside a
    spring-forward gap that is the offset before the gap, and the date keeps
    reading with it until its instant next changes.
    """
    if zone_id is None:
        offset = host.timezone_offset(local)
        return UtcInstant(ms=local.get_time() + offset * calendar.MS_PER_MINUTE), None

    info = provider.get_tz_info(local, zone_id, False)
    if not info:
        if local.is_valid():
            logger.warning("Zone %r could not be resolved at %s; using host offset", zone_id, local.get_time())
        offset = host.timezone_offset(local)
        return UtcInstant(ms=local.get_time() + offset * calendar.MS_PER_MINUTE), UnresolvedZone(id=zone_id)

    instant = UtcInstant(ms=local.get_time() + info.offset_minutes * calendar.MS_PER_MINUTE)
    return instant, ResolvedZone(id=zone_id, info=info, valid_at=instant.get_time())


class ZonedDate:
    """A date whose local fields are read and written in a named time zone.

    The absolute time is a :class:`UtcInstant`. The zone tag and the local
    projection are derived from it lazily and dropped whenever the absolute
    time changes. Instances are built by
    :class:`zoned_date.application.factory.ZonedDateFactory`.
    """

    def __init__(
        self,
        instant: UtcInstant,
        zone: ZoneTag,
        provider: ZoneInfoProviderPort,
        host: HostDatePort,
    ) -> None:
        self._instant = instant
        self._zone = zone
        self._projection: Optional[LocalProjection] = None
        self._provider = provider
        self._host = host

    @classmethod
    def from_local(
        cls,
        local: UtcInstant,
        zone_id: Optional[str],
        provider: ZoneInfoProviderPort,
        host: HostDatePort,
    ) -> "ZonedDate":
        instant, zone = convert_from_local(local, zone_id, provider, host)
        return cls(instant, zone, provider, host)

    @property
    def zone_id(self) -> Optional[str]:
        return zone_id_of(self._zone)

    @property
    def instant(self) -> UtcInstant:
        return self._instant

    # Zone resolution ---------------------------------------------------------

    def _resolve_zone(self) -> Optional[ZoneOffset]:
        zone = self._zone
        if zone is None:
            return None
        time = self._instant.get_time()
        if isinstance(zone, ResolvedZone):
            if zone.is_valid_at(time):
                return zone.info
            zone = zone.demote()
        # The provider only ever sees the UtcInstant, never this object, so it
        # cannot re-enter zone resolution.
        info = self._provider.get_tz_info(self._instant, zone.id, True)
        if not info:
            logger.debug("No zone information for %r at %s", zone.id, time)
            self._zone = zone
            return None
        logger.debug("Resolved %r at %s: %s", zone.id, time, info)
        self._zone = ResolvedZone(id=zone.id, info=info, valid_at=time)
        return info

    def _project_local(self) -> UtcInstant:
        # The projection is shared cache state: read fields off it, never hand it out.
        time = self._instant.get_time()
        projection = self._projection
        if projection is not None and projection.valid_at == time:
            return projection.instant
        offset = self.get_timezone_offset()
        local = UtcInstant(ms=time - offset * calendar.MS_PER_MINUTE)
        self._projection = LocalProjection(instant=local, valid_at=time)
        return local

    def _invalidate_caches(self) -> None:
        if isinstance(self._zone, ResolvedZone):
            self._zone = self._zone.demote()
        self._projection = None

    def _set_local_parts(self, builder: Callable[..., UtcInstant], *args: Any) -> float:
        local = builder(self._project_local(), *args)
        instant, _ = convert_from_local(local, self.zone_id, self._provider, self._host)
        self._instant = instant
        self._invalidate_caches()
        return self.get_time()

    def _set_utc_parts(self, builder: Callable[..., UtcInstant], *args: Any) -> float:
        self._instant = builder(self._instant, *args)
        self._invalidate_caches()
        return self.get_time()

    # Absolute time -----------------------------------------------------------

    def get_time(self) -> float:
        return self._instant.get_time()

    def value_of(self) -> float:
        return self._instant.get_time()

    def set_time(self, time: Any) -> float:
        self._instant = UtcInstant(ms=calendar.to_number(time))
        self._invalidate_caches()
        return self.get_time()

    def get_timezone_offset(self) -> float:
        info = self._resolve_zone()
        if info:
            return info.offset_minutes
        return self._host.timezone_offset(self._instant)

    # Local getters -----------------------------------------------------------

    def get_full_year(self) -> float:
        return self._project_local().get_utc_full_year()

    def get_year(self) -> float:
        year = self.get_full_year()
        return year - 1900 if calendar.is_finite(year) else year

    def get_month(self) -> float:
        return self._project_local().get_utc_month()

    def get_date(self) -> float:
        return self._project_local().get_utc_date()

    def get_day(self) -> float:
        return self._project_local().get_utc_day()

    def get_hours(self) -> float:
        return self._project_local().get_utc_hours()

    def get_minutes(self) -> float:
        return self._project_local().get_utc_minutes()

    def get_seconds(self) -> float:
        return self._project_local().get_utc_seconds()

    def get_milliseconds(self) -> float:
        return self._project_local().get_utc_milliseconds()

    # Local setters -----------------------------------------------------------

    def set_full_year(self, year: Any, month: Optional[Any] = None, date: Optional[Any] = None) -> float:
        return self._set_local_parts(UtcInstant.with_utc_full_year, year, month, date)

    def set_year(self, year: Any) -> float:
        return self._set_local_parts(UtcInstant.with_utc_year, year)

    def set_month(self, month: Any, date: Optional[Any] = None) -> float:
        return self._set_local_parts(UtcInstant.with_utc_month, month, date)

    def set_date(self, date: Any) -> float:
        return self._set_local_parts(UtcInstant.with_utc_date, date)

    def set_hours(
        self,
        hours: Any,
        minutes: Optional[Any] = None,
        seconds: Optional[Any] = None,
        ms: Optional[Any] = None,
    ) -> float:
        return self._set_local_parts(UtcInstant.with_utc_hours, hours, minutes, seconds, ms)

    def set_minutes(self, minutes: Any, seconds: Optional[Any] = None, ms: Optional[Any] = None) -> float:
        return self._set_local_parts(UtcInstant.with_utc_minutes, minutes, seconds, ms)

    def set_seconds(self, seconds: Any, ms: Optional[Any] = None) -> float:
        return self._set_local_parts(UtcInstant.with_utc_seconds, seconds, ms)

    def set_milliseconds(self, ms: Any) -> float:
        return self._set_local_parts(UtcInstant.with_utc_milliseconds, ms)

    # UTC getters and setters -------------------------------------------------

    def get_utc_full_year(self) -> float:
        return self._instant.get_utc_full_year()

    def get_utc_month(self) -> float:
        return self._instant.get_utc_month()

    def get_utc_date(self) -> float:
        return self._instant.get_utc_date()

    def get_utc_day(self) -> float:
        return self._instant.get_utc_day()

    def get_utc_hours(self) -> float:
        return self._instant.get_utc_hours()

    def get_utc_minutes(self) -> float:
        return self._instant.get_utc_minutes()

    def get_utc_seconds(self) -> float:
        return self._instant.get_utc_seconds()

    def get_utc_milliseconds(self) -> float:
        return self._instant.get_utc_milliseconds()

    def set_utc_full_year(self, year: Any, month: Optional[Any] = None, date: Optional[Any] = None) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_full_year, year, month, date)

    def set_utc_month(self, month: Any, date: Optional[Any] = None) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_month, month, date)

    def set_utc_date(self, date: Any) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_date, date)

    def set_utc_hours(
        self,
        hours: Any,
        minutes: Optional[Any] = None,
        seconds: Optional[Any] = None,
        ms: Optional[Any] = None,
    ) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_hours, hours, minutes, seconds, ms)

    def set_utc_minutes(self, minutes: Any, seconds: Optional[Any] = None, ms: Optional[Any] = None) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_minutes, minutes, seconds, ms)

    def set_utc_seconds(self, seconds: Any, ms: Optional[Any] = None) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_seconds, seconds, ms)

    def set_utc_milliseconds(self, ms: Any) -> float:
        return self._set_utc_parts(UtcInstant.with_utc_milliseconds, ms)

    # Strings -----------------------------------------------------------------

    def to_date_string(self) -> str:
        if not self._instant.is_valid():
            return INVALID_DATE
        local = self._project_local()
        return (
            f"{calendar.WEEKDAY_NAMES[local.get_utc_day()]} {calendar.MONTH_NAMES[local.get_utc_month()]} "
            f"{local.get_utc_date()} {local.get_utc_full_year()}"
        )

    def to_time_string(self) -> str:
        """Wall-clock time plus ``GMT+HHMM (ABBR)`` when the zone resolves."""
        if not self._instant.is_valid():
            return INVALID_DATE
        local = self._project_local()
        text = f"{local.get_utc_hours():02d}:{local.get_utc_minutes():02d}:{local.get_utc_seconds():02d}"
        info = self._resolve_zone()
        if info:
            offset = info.offset_minutes
            prefix = "-"
            if offset <= 0:
                prefix = "+"
                offset = -offset
            text += f" GMT{prefix}{offset // 60:02d}{offset % 60:02d} ({info.abbreviation})"
        return text

    def to_string(self) -> str:
        if self._zone is None:
            return self._host.to_string(self._instant)
        if not self._instant.is_valid():
            return INVALID_DATE
        return f"{self.to_date_string()} {self.to_time_string()}"

    def to_iso_string(self) -> str:
        return self._instant.to_iso_string()

    def to_utc_string(self) -> str:
        return self._instant.to_utc_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        when = self._instant.to_iso_string() if self._instant.is_valid() else INVALID_DATE
        return f"ZonedDate({when}, zone={self.zone_id!r})"

    def __int__(self) -> int:
        if not self._instant.is_valid():
            raise ValueError("Invalid time value")
        return int(self._instant.get_time())

    def __float__(self) -> float:
        return float(self._instant.get_time())
