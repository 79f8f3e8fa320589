from .adapters.host.system import SystemHost
from .adapters.zoneinfo.mock import FixedZone, FixedZoneProvider, Transition
from .adapters.zoneinfo.provider import ZoneinfoProvider
from .application.factory import CoercionError, ZonedDateFactory, to_primitive
from .application.settings import ZoneSettings
from .domain.calendar import INVALID_TIME
from .domain.instant import UtcInstant
from .domain.zone import ZoneOffset
from .domain.zoned import ZonedDate
from .ports.host import HostDatePort
from .ports.zone_provider import ZoneInfoProviderPort

__all__ = [
    "ZonedDateFactory",
    "ZonedDate",
    "UtcInstant",
    "ZoneOffset",
    "ZoneSettings",
    "ZoneInfoProviderPort",
    "HostDatePort",
    "ZoneinfoProvider",
    "FixedZoneProvider",
    "FixedZone",
    "Transition",
    "SystemHost",
    "CoercionError",
    "INVALID_TIME",
    "to_primitive",
]
