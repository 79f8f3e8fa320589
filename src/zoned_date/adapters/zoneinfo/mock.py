from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.zone import ZoneOffset
from zoned_date.ports.zone_provider import ZoneInfoProviderPort


@dataclass(frozen=True)
class Transition:
    at: int
    offset_minutes: int
    abbreviation: str


@dataclass(frozen=True)
class FixedZone:
    """A zone with a base offset and optional transitions, ordered by ``at`` (UTC ms)."""

    offset_minutes: int
    abbreviation: str
    transitions: Tuple[Transition, ...] = field(default_factory=tuple)


class FixedZoneProvider(ZoneInfoProviderPort):
    """
    In-memory zone provider for development and tests.

    Zones are plain offset tables, so results never depend on the installed
    time zone database. A local reading falls on the far side of a transition
    once it is at or past the transition when read with the offset in force
    before it, which matches ``fold=0`` resolution in the zoneinfo provider.
    """

    def __init__(self, zones: Optional[Dict[str, FixedZone]] = None) -> None:
        self.zones: Dict[str, FixedZone] = dict(zones or {})

    def add_zone(self, zone_id: str, zone: FixedZone) -> None:
        self.zones[zone_id] = zone

    def get_tz_info(self, instant: UtcInstant, zone_id: str, is_utc: bool) -> Optional[ZoneOffset]:
        zone = self.zones.get(zone_id)
        if zone is None or not instant.is_valid():
            return None
        time = instant.get_time()
        offset, abbreviation = zone.offset_minutes, zone.abbreviation
        for transition in zone.transitions:
            utc_time = time if is_utc else time + offset * calendar.MS_PER_MINUTE
            if utc_time < transition.at:
                break
            offset, abbreviation = transition.offset_minutes, transition.abbreviation
        return ZoneOffset(offset_minutes=offset, abbreviation=abbreviation)
