"""Tidewatch - NOAA tides and conditions with display formatting and an almanac.

Architecture::

    datasources/coops/      NOAA CO-OPS data getter + metadata API (tides, conditions)
    datasources/astronomy/  Sun/moon events computed locally with astral
    almanac.py              Station-based moon phase and rise/set lookups
    shaping.py              Upstream records -> formatted output records
    formatting.py           Numeric rounding and rendering
    units.py                Unit symbols per measurement system
    moon.py                 Cycle fraction -> named lunar phase
    schemas.py              Enumerations, request parameters, station metadata
    services/http.py        Shared HTTP session

Data flow: operation -> RequestParams (caller > operation > settings) ->
session.get -> JSON -> shaping -> FormattedMeasurement / FormattedWindObservation
"""

__version__ = "0.1.0"

from tidewatch.almanac import moon_phase, moonrise_moonset, sunrise_sunset
from tidewatch.config import Settings, get_settings
from tidewatch.datasources.coops import (
    current_air_pressure,
    current_air_temperature,
    current_water_level,
    current_water_temperature,
    current_wind,
    get,
    station_metadata,
    tide_predictions,
)
from tidewatch.exceptions import TransportError, UpstreamShapeError, ValidationError
from tidewatch.schemas import MeasurementSystem, RequestParams, StationMetadata

__all__ = [
    "MeasurementSystem",
    "RequestParams",
    "Settings",
    "StationMetadata",
    "TransportError",
    "UpstreamShapeError",
    "ValidationError",
    "__version__",
    "current_air_pressure",
    "current_air_temperature",
    "current_water_level",
    "current_water_temperature",
    "current_wind",
    "get",
    "get_settings",
    "moon_phase",
    "moonrise_moonset",
    "station_metadata",
    "sunrise_sunset",
    "tide_predictions",
]
