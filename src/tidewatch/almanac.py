"""
Moon phase and rise/set lookups for stations.

Rise/set operations make two sequential calls: the station's coordinates
come from the CO-OPS metadata API, then the astronomy adapter computes the
events for that position. Nothing is cached; every call recomputes.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

from tidewatch.datasources import astronomy
from tidewatch.datasources.astronomy import MoonTimes, SunTimes
from tidewatch.datasources.coops import station_metadata
from tidewatch.moon import MoonPhaseReading, classify

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(UTC).date()


def moon_phase(day: date | None = None) -> MoonPhaseReading:
    """Named phase and pictograph of the moon on ``day`` (defaults to today, UTC)."""
    return classify(astronomy.illumination(day or _today()))


def moonrise_moonset(
    station_id: str | int,
    day: date | None = None,
    *,
    timeout: float | None = None,
) -> MoonTimes:
    """Moonrise and moonset at a station's position."""
    station = station_metadata(station_id, timeout=timeout)
    logger.debug("Moon times for %s (%s)", station.id, station.name)
    return astronomy.moon_times(
        day or _today(), station.latitude, station.longitude, station.utc_offset_hours
    )


def sunrise_sunset(
    station_id: str | int,
    day: date | None = None,
    *,
    timeout: float | None = None,
) -> SunTimes:
    """Sunrise, sunset and twilight instants at a station's position."""
    station = station_metadata(station_id, timeout=timeout)
    logger.debug("Sun times for %s (%s)", station.id, station.name)
    return astronomy.sun_times(
        day or _today(), station.latitude, station.longitude, station.utc_offset_hours
    )
