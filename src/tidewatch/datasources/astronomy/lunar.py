"""Moon position, phase and rise/set times via ``astral``."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, tzinfo
from typing import TYPE_CHECKING

from astral import Observer
from astral import moon as astral_moon

from tidewatch.datasources.astronomy.models import MoonTimes
from tidewatch.datasources.astronomy.zones import local_zone

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# astral reports the lunar age on a 0-27.99 scale
ASTRAL_CYCLE_DAYS = 28.0


def illumination(day: date) -> float:
    """Position of the moon in its cycle on ``day``: 0 new, 0.5 full, approaching 1."""
    age = astral_moon.phase(day)
    return min(max(age / ASTRAL_CYCLE_DAYS, 0.0), 1.0)


def _event(
    calc: Callable[..., datetime | None], observer: Observer, day: date, zone: tzinfo
) -> datetime | None:
    try:
        result = calc(observer, day, tzinfo=zone)
    except ValueError:
        # astral raises when the event does not happen on this day
        return None
    return result.astimezone(UTC) if result is not None else None


def moon_times(
    day: date, lat: float, lon: float, utc_offset_hours: float | None = None
) -> MoonTimes:
    """
    Moonrise and moonset on the local calendar ``day`` at a location, in UTC.

    When the moon neither rises nor sets, its elevation at local noon decides
    whether it stays up or stays down all day.
    """
    observer = Observer(latitude=lat, longitude=lon)
    zone = local_zone(lon, utc_offset_hours)
    rise = _event(astral_moon.moonrise, observer, day, zone)
    set_ = _event(astral_moon.moonset, observer, day, zone)
    logger.debug("Moon times for %s at (%s, %s): rise=%s set=%s", day, lat, lon, rise, set_)

    if rise is None and set_ is None:
        noon = datetime.combine(day, time(12), tzinfo=zone)
        up = astral_moon.elevation(observer, noon) > 0
        return MoonTimes(rise=None, set=None, always_up=up, always_down=not up)

    return MoonTimes(rise=rise, set=set_)
