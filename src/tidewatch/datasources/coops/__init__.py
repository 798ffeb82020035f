"""NOAA CO-OPS tides & currents data source.

Public API:
  - client: get (generic data getter), resolve_params, today_yyyymmdd, API URLs
  - metadata: station_metadata
  - predictions: tide_predictions
  - observations: current_water_level, current_air_temperature,
    current_water_temperature, current_air_pressure, current_wind
"""

from tidewatch.datasources.coops.client import (
    DATA_GETTER_API,
    METADATA_API,
    get,
    resolve_params,
    today_yyyymmdd,
)
from tidewatch.datasources.coops.metadata import station_metadata
from tidewatch.datasources.coops.observations import (
    current_air_pressure,
    current_air_temperature,
    current_water_level,
    current_water_temperature,
    current_wind,
)
from tidewatch.datasources.coops.predictions import tide_predictions

__all__ = [
    "DATA_GETTER_API",
    "METADATA_API",
    "current_air_pressure",
    "current_air_temperature",
    "current_water_level",
    "current_water_temperature",
    "current_wind",
    "get",
    "resolve_params",
    "station_metadata",
    "tide_predictions",
    "today_yyyymmdd",
]
