from zoned_date.adapters.zoneinfo.mock import FixedZone, FixedZoneProvider, Transition
from zoned_date.adapters.zoneinfo.provider import ZoneinfoProvider

__all__ = ["FixedZone", "FixedZoneProvider", "Transition", "ZoneinfoProvider"]
