from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from zoned_date.domain.instant import UtcInstant


class ZoneOffset(BaseModel):
    """Offset and abbreviation a zone applies at one instant.

    ``offset_minutes`` is what must be added to local wall-clock time to get
    UTC, so zones east of Greenwich have negative offsets.
    """

    offset_minutes: int
    abbreviation: str
    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class UnresolvedZone:
    id: str


@dataclass(frozen=True)
class ResolvedZone:
    """Snapshot of a zone's behaviour, valid only at ``valid_at``."""

    id: str
    info: ZoneOffset
    valid_at: float

    def is_valid_at(self, time: float) -> bool:
        return self.valid_at == time

    def demote(self) -> UnresolvedZone:
        return UnresolvedZone(id=self.id)


# None means the instant carries no zone of its own.
ZoneTag = Optional[Union[UnresolvedZone, ResolvedZone]]


@dataclass(frozen=True)
class LocalProjection:
    """Instant whose UTC fields read as the wall clock of the real instant."""

    instant: UtcInstant
    valid_at: float


def zone_id_of(tag: ZoneTag) -> Optional[str]:
    return tag.id if tag is not None else None
