from typing import Optional

from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.zone import ZoneOffset


class ZoneInfoProviderPort:
    """Looks up the offset and abbreviation a named zone applies at an instant.

    With ``is_utc`` set, ``instant`` is a true UTC instant. Otherwise its UTC
    fields carry a wall-clock reading in ``zone_id`` and the provider resolves
    the offset for that local time.

    Implementations return ``None`` when the zone is unknown or the instant is
    outside the range they cover.
    """

    def get_tz_info(self, instant: UtcInstant, zone_id: str, is_utc: bool) -> Optional[ZoneOffset]:
        raise NotImplementedError
