"""Astronomy data source (local computation with ``astral``, no network).

Public API:
  - models: MoonTimes, SunTimes
  - lunar: illumination, moon_times
  - solar: sun_times
  - zones: local_zone (events are grouped by the observer's calendar day)
"""

from tidewatch.datasources.astronomy.lunar import illumination, moon_times
from tidewatch.datasources.astronomy.models import MoonTimes, SunTimes
from tidewatch.datasources.astronomy.solar import sun_times
from tidewatch.datasources.astronomy.zones import local_zone

__all__ = [
    "MoonTimes",
    "SunTimes",
    "illumination",
    "local_zone",
    "moon_times",
    "sun_times",
]
