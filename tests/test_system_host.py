import math
import re
from datetime import datetime, timezone

from zoned_date.adapters.host.system import SystemHost
from zoned_date.domain import calendar
from zoned_date.domain.instant import UtcInstant

NOW = calendar.utc(2021, 2, 1, 12)


def test_now_tracks_the_clock():
    reference = int(datetime.now(timezone.utc).timestamp() * 1000)
    assert abs(SystemHost().now() - reference) < 5000


def test_parses_utc_string_format():
    host = SystemHost()
    assert host.parse("Mon, 01 Mar 2021 12:00:00 GMT") == NOW
    assert host.parse("Mon, 01 Mar 2021 12:00:00 +0200") == NOW - 2 * calendar.MS_PER_HOUR


def test_parses_to_string_format():
    host = SystemHost()
    assert host.parse("Mon Mar 01 2021 13:00:00 GMT+0100 (CET)") == NOW
    assert host.parse("Mon Mar 01 2021 07:00:00 GMT-0500") == NOW


def test_rejects_unreadable_text():
    host = SystemHost()
    assert math.isnan(host.parse("not-a-date-string"))
    assert math.isnan(host.parse("Europe/Paris"))


def test_to_string_shape_and_round_trip():
    host = SystemHost()
    instant = UtcInstant(ms=NOW)
    text = host.to_string(instant)
    assert re.match(r"^[A-Z][a-z]{2} [A-Z][a-z]{2} \d{2} \d{4} \d{2}:\d{2}:\d{2} GMT[+-]\d{4}( \(.+\))?$", text)
    assert host.parse(text) == NOW


def test_invalid_instant():
    host = SystemHost()
    assert host.to_string(UtcInstant.invalid()) == "Invalid Date"
    assert math.isnan(host.timezone_offset(UtcInstant.invalid()))


def test_offset_is_whole_minutes():
    offset = SystemHost().timezone_offset(UtcInstant(ms=NOW))
    assert offset == int(offset)
