from __future__ import annotations

import logging
import sys
from typing import List, Optional

from zoned_date.adapters.zoneinfo.provider import ZoneinfoProvider
from zoned_date.application.factory import ZonedDateFactory
from zoned_date.application.settings import DEFAULT_ZONE_ENV, ZoneSettings


def main(argv: Optional[List[str]] = None) -> None:
    """
    Print the current time in one or more zones.

    Usage: ``zoned-date [ZONE ...]``

    Without arguments the zone comes from the environment.

    Optional environment variables:
    - ZONED_DATE_DEFAULT_ZONE   (e.g. Europe/London)
    - ZONED_DATE_TAG_ABSOLUTE   (tag timestamp-built dates with the default zone)
    """

    zones = list(sys.argv[1:] if argv is None else argv)
    settings = ZoneSettings.from_env()
    if not zones and settings.default_zone:
        zones = [settings.default_zone]
    if not zones:
        raise SystemExit(f"No zone given and {DEFAULT_ZONE_ENV} is not set")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logging.info("Rendering current time for %d zone(s)", len(zones))

    factory = ZonedDateFactory(provider=ZoneinfoProvider(), settings=settings)
    now = factory.now()
    for zone_id in zones:
        print(f"{zone_id}: {factory.from_timestamp(now, zone_id)}")


if __name__ == "__main__":
    main()
