import math

from zoned_date.adapters.zoneinfo.provider import ZoneinfoProvider
from zoned_date.application.factory import ZonedDateFactory
from zoned_date.application.settings import ZoneSettings
from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant
from zoned_date.domain.zone import ZoneOffset
from zoned_date.ports.host import HostDatePort

NOW = calendar.utc(2021, 2, 1, 12)


class FixedNowHost(HostDatePort):
    def now(self) -> int:
        return NOW

    def timezone_offset(self, instant: UtcInstant) -> float:
        return 0 if instant.is_valid() else math.nan

    def to_string(self, instant: UtcInstant) -> str:
        return instant.to_utc_string()

    def parse(self, text: str) -> float:
        return math.nan


def _utc_query(zone_id: str, *fields):
    return ZoneinfoProvider().get_tz_info(UtcInstant(ms=calendar.utc(*fields)), zone_id, True)


def _local_query(zone_id: str, *fields):
    return ZoneinfoProvider().get_tz_info(UtcInstant(ms=calendar.utc(*fields)), zone_id, False)


def test_utc_queries_follow_daylight_saving():
    assert _utc_query("Europe/London", 2021, 0, 15, 12) == ZoneOffset(offset_minutes=0, abbreviation="GMT")
    assert _utc_query("Europe/London", 2021, 5, 15, 12) == ZoneOffset(offset_minutes=-60, abbreviation="BST")
    assert _utc_query("America/New_York", 2021, 0, 15, 12) == ZoneOffset(offset_minutes=300, abbreviation="EST")
    assert _utc_query("Asia/Kolkata", 2021, 0, 15, 12) == ZoneOffset(offset_minutes=-330, abbreviation="IST")


def test_utc_query_at_transition_boundary():
    assert _utc_query("Europe/London", 2021, 2, 28, 0, 59, 59, 999).offset_minutes == 0
    assert _utc_query("Europe/London", 2021, 2, 28, 1).offset_minutes == -60


def test_local_query_in_spring_gap_uses_offset_before_gap():
    assert _local_query("Europe/London", 2021, 2, 28, 1, 30).offset_minutes == 0


def test_local_query_in_autumn_overlap_uses_first_offset():
    assert _local_query("Europe/London", 2021, 9, 31, 1, 30).offset_minutes == -60
    assert _local_query("Europe/London", 2021, 9, 31, 2, 30).offset_minutes == 0


def test_unknown_zone_and_invalid_instants_give_none():
    provider = ZoneinfoProvider()
    assert provider.get_tz_info(UtcInstant(ms=0), "Nowhere/Unknown", True) is None
    assert provider.get_tz_info(UtcInstant.invalid(), "Europe/London", True) is None
    assert _local_query("Europe/London", 10000, 0, 1) is None


def test_setting_hours_across_london_spring_forward():
    factory = ZonedDateFactory(provider=ZoneinfoProvider(), settings=ZoneSettings(), host=FixedNowHost())
    date = factory.new(2021, 2, 28, 0, 30, 0, 0, "Europe/London")
    assert date.get_timezone_offset() == 0

    date.set_hours(3)

    assert date.get_time() == calendar.utc(2021, 2, 28, 2, 30)
    assert date.get_timezone_offset() == -60
    assert date.to_string() == "Sun Mar 28 2021 03:30:00 GMT+0100 (BST)"


def test_spring_gap_construction_reading():
    factory = ZonedDateFactory(provider=ZoneinfoProvider(), settings=ZoneSettings(), host=FixedNowHost())
    date = factory.new(2021, 2, 28, 1, 30, 0, 0, "Europe/London")

    assert date.get_time() == calendar.utc(2021, 2, 28, 1, 30)
    assert date.to_string() == "Sun Mar 28 2021 01:30:00 GMT+0000 (GMT)"

    # Any setter drops the tag resolved at the wall-clock reading.
    date.set_minutes(30)

    assert date.get_time() == calendar.utc(2021, 2, 28, 1, 30)
    assert date.to_string() == "Sun Mar 28 2021 02:30:00 GMT+0100 (BST)"


def test_round_trip_in_real_zones():
    factory = ZonedDateFactory(provider=ZoneinfoProvider(), settings=ZoneSettings(), host=FixedNowHost())
    fields = (2021, 6, 4, 18, 45, 12, 250)
    for zone_id in ("Europe/Berlin", "America/Los_Angeles", "Australia/Sydney", "UTC"):
        date = factory.new(*fields, zone_id)
        assert (
            date.get_full_year(),
            date.get_month(),
            date.get_date(),
            date.get_hours(),
            date.get_minutes(),
            date.get_seconds(),
            date.get_milliseconds(),
        ) == fields


def test_zone_name_construction_shows_current_offset():
    factory = ZonedDateFactory(provider=ZoneinfoProvider(), settings=ZoneSettings(), host=FixedNowHost())
    date = factory.new("Europe/Paris")
    assert date.get_time() == NOW
    assert date.to_string() == "Mon Mar 1 2021 13:00:00 GMT+0100 (CET)"
