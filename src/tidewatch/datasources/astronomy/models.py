"""Sun and moon event models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class MoonTimes:
    """Moonrise and moonset on one local calendar day at one place (UTC)."""

    rise: datetime | None
    set: datetime | None
    always_up: bool = False
    always_down: bool = False


@dataclass(frozen=True)
class SunTimes:
    """
    Solar events of one local calendar day (UTC), in chronological order
    for mid latitudes.

    Events the sun never reaches at the given latitude (polar day or night)
    are ``None``.
    """

    night_end: datetime | None
    nautical_dawn: datetime | None
    dawn: datetime | None
    sunrise: datetime | None
    sunrise_end: datetime | None
    golden_hour_end: datetime | None
    solar_noon: datetime | None
    sunset_start: datetime | None
    sunset: datetime | None
    dusk: datetime | None
    nautical_dusk: datetime | None
    night: datetime | None
    nadir: datetime | None
