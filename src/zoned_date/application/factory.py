from __future__ import annotations

import logging
import math
from typing import Any, Optional, Union

from zoned_date.adapters.host.system import SystemHost
from zoned_date.application.arguments import MAX_DATE_FIELDS, NoArguments, PositionalFields, SingleValue, classify
from zoned_date.application.settings import ZoneSettings
from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.parsing import parse_iso
from zoned_date.domain.zone import UnresolvedZone
from zoned_date.domain.zoned import ZonedDate
from zoned_date.ports.host import HostDatePort
from zoned_date.ports.zone_provider import ZoneInfoProviderPort

logger = logging.getLogger(__name__)

Primitive = Union[str, int, float]


class CoercionError(TypeError):
    pass


def _is_primitive(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def to_primitive(value: Any) -> Primitive:
    """Reduce ``value`` to a string or number.

    Strings and numbers pass through. Other objects are asked for
    ``value_of()`` first and ``to_string()`` second; the first primitive result
    wins.
    """
    if _is_primitive(value):
        return value
    if value is None or isinstance(value, bool):
        raise CoercionError(f"Cannot build a date from {value!r}")
    for method_name in ("value_of", "to_string"):
        method = getattr(value, method_name, None)
        if callable(method):
            result = method()
            if _is_primitive(result):
                return result
    raise CoercionError("Cannot find default value for object.")


def _date_field(value: Any) -> float:
    # Missing, None and NaN fields count as 0; unreadable strings stay NaN.
    if value is None:
        return 0
    primitive = to_primitive(value)
    number = calendar.to_number(primitive)
    if not isinstance(primitive, str) and math.isnan(number):
        return 0
    return number


class ZonedDateFactory:
    """Builds :class:`ZonedDate` values from the date constructor's overloads.

    ``new`` behaves like constructing the primitive; ``call_as_function``
    behaves like calling it without construction and returns the display
    string.
    """

    def __init__(
        self,
        provider: ZoneInfoProviderPort,
        settings: Optional[ZoneSettings] = None,
        host: Optional[HostDatePort] = None,
    ) -> None:
        self.provider = provider
        self.settings = settings if settings is not None else ZoneSettings()
        self.host = host if host is not None else SystemHost()

    @property
    def default_zone(self) -> Optional[str]:
        return self.settings.default_zone

    def set_default_zone(self, zone_id: Optional[str]) -> None:
        """Change the zone used by later constructions; existing dates keep theirs."""
        self.settings.default_zone = zone_id
        logger.info("Default zone set to %r", zone_id)

    # Construction ------------------------------------------------------------

    def new(self, *args: Any) -> ZonedDate:
        arguments = classify(args)
        if isinstance(arguments, NoArguments):
            # Current time does not depend on a zone.
            return self._absolute(self.host.now())
        if isinstance(arguments, SingleValue):
            return self._from_single_value(arguments)
        return self._from_positional_fields(arguments)

    def call_as_function(self, *args: Any) -> str:
        return self.new(*args).to_string()

    def from_timestamp(self, ms: Any, zone_id: Optional[str] = None) -> ZonedDate:
        """Absolute instant tagged with ``zone_id`` (or the default handling when omitted)."""
        if zone_id is None:
            return self._absolute(calendar.to_number(ms))
        return self._tagged(calendar.to_number(ms), zone_id)

    def _from_single_value(self, arguments: SingleValue) -> ZonedDate:
        value = to_primitive(arguments.value)
        if isinstance(value, str):
            parsed = self.parse(value)
            if math.isnan(parsed):
                # Not a date: the string names a zone.
                return self._tagged(self.host.now(), value)
            return self._absolute(parsed)
        return self._absolute(value)

    def _from_positional_fields(self, arguments: PositionalFields) -> ZonedDate:
        fields = [_date_field(value) for value in arguments.fields]
        fields += [0] * (MAX_DATE_FIELDS - len(fields))
        local = UtcInstant(ms=calendar.utc(*fields))
        zone_id = arguments.zone_id if arguments.zone_id is not None else self.default_zone
        return ZonedDate.from_local(local, zone_id, self.provider, self.host)

    def _absolute(self, ms: float) -> ZonedDate:
        if self.settings.tag_absolute_constructions and self.default_zone is not None:
            return self._tagged(ms, self.default_zone)
        return ZonedDate(UtcInstant(ms=ms), None, self.provider, self.host)

    def _tagged(self, ms: float, zone_id: str) -> ZonedDate:
        return ZonedDate(UtcInstant(ms=ms), UnresolvedZone(id=zone_id), self.provider, self.host)

    # Static helpers of the primitive -------------------------------------------

    def parse(self, text: Any) -> float:
        """Epoch milliseconds for ``text``, or ``nan``.

        The ISO subset is read directly; anything else goes to the host parser.
        """
        if not isinstance(text, str):
            text = str(text)
        value = parse_iso(text)
        if value is None:
            logger.debug("Falling back to host parser for %r", text)
            return self.host.parse(text)
        return value

    def utc(self, *fields: Any) -> float:
        return calendar.utc(*fields)

    def now(self) -> int:
        return self.host.now()
