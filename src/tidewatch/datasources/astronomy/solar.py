"""Solar events via ``astral``.

astral works in apparent elevation (refraction applied) and places sunrise
and sunset where the upper limb touches the horizon, i.e. the disk centre at
minus one apparent radius. The events astral has no named helper for use the
same frame:
  - sunrise end / sunset start: disk centre at plus one apparent radius
    (lower limb on the horizon)
  - golden hour end: +6 degrees

Events belong to the observer's local calendar day and are returned in UTC.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, tzinfo
from typing import Any

from astral import Depression, Observer, SunDirection
from astral import sun as astral_sun

from tidewatch.datasources.astronomy.models import SunTimes
from tidewatch.datasources.astronomy.zones import local_zone

logger = logging.getLogger(__name__)

# Same apparent radius astral uses for sunrise/sunset (32 arc minutes across)
SUN_APPARENT_RADIUS = 32.0 / (60.0 * 2.0)
SUN_DISK_CLEAR_ELEVATION = SUN_APPARENT_RADIUS
GOLDEN_HOUR_ELEVATION = 6.0


def _at(calc: Any, *args: Any, zone: tzinfo, **kwargs: Any) -> datetime | None:
    try:
        result: datetime = calc(*args, tzinfo=zone, **kwargs)
    except ValueError:
        # Sun never reaches this elevation today
        return None
    return result.astimezone(UTC)


def sun_times(
    day: date, lat: float, lon: float, utc_offset_hours: float | None = None
) -> SunTimes:
    """
    Compute the 13 solar events of ``day`` at a location.

    Args:
        day: Calendar day at the location.
        lat: Latitude.
        lon: Longitude.
        utc_offset_hours: Local offset from UTC (estimated from ``lon`` when omitted).
    """
    obs = Observer(latitude=lat, longitude=lon)
    zone = local_zone(lon, utc_offset_hours)
    elevation = astral_sun.time_at_elevation

    times = SunTimes(
        night_end=_at(astral_sun.dawn, obs, day, zone=zone, depression=Depression.ASTRONOMICAL),
        nautical_dawn=_at(astral_sun.dawn, obs, day, zone=zone, depression=Depression.NAUTICAL),
        dawn=_at(astral_sun.dawn, obs, day, zone=zone, depression=Depression.CIVIL),
        sunrise=_at(astral_sun.sunrise, obs, day, zone=zone),
        sunrise_end=_at(
            elevation, obs, SUN_DISK_CLEAR_ELEVATION, day, SunDirection.RISING, zone=zone
        ),
        golden_hour_end=_at(
            elevation, obs, GOLDEN_HOUR_ELEVATION, day, SunDirection.RISING, zone=zone
        ),
        solar_noon=_at(astral_sun.noon, obs, day, zone=zone),
        sunset_start=_at(
            elevation, obs, SUN_DISK_CLEAR_ELEVATION, day, SunDirection.SETTING, zone=zone
        ),
        sunset=_at(astral_sun.sunset, obs, day, zone=zone),
        dusk=_at(astral_sun.dusk, obs, day, zone=zone, depression=Depression.CIVIL),
        nautical_dusk=_at(astral_sun.dusk, obs, day, zone=zone, depression=Depression.NAUTICAL),
        night=_at(astral_sun.dusk, obs, day, zone=zone, depression=Depression.ASTRONOMICAL),
        nadir=_at(astral_sun.midnight, obs, day, zone=zone),
    )
    logger.debug("Sun times for %s at (%s, %s): %s", day, lat, lon, times)
    return times
