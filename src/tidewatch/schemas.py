"""
Domain models for tidewatch.

Closed enumerations for every enumerated NOAA CO-OPS query parameter, the
request parameter structure that resolves defaults before a query is sent,
and the station metadata record. Each enumeration member's value is the
exact string the API expects on the wire.
"""

from __future__ import annotations

import datetime
import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enumerations
# =============================================================================


class MeasurementSystem(StrEnum):
    """Unit system for returned magnitudes."""

    IMPERIAL = "english"
    METRIC = "metric"


class Product(StrEnum):
    """Data products served by the data getter API."""

    WATER_LEVEL = "water_level"
    AIR_TEMP = "air_temperature"
    WATER_TEMP = "water_temperature"
    WIND = "wind"
    AIR_PRESSURE = "air_pressure"
    AIR_GAP = "air_gap"
    CONDUCTIVITY = "conductivity"
    VISIBILITY = "visibility"
    HUMIDITY = "humidity"
    SALINITY = "salinity"
    HOURLY_HEIGHT = "hourly_height"
    HIGH_LOW = "high_low"
    DAILY_MEAN = "daily_mean"
    MONTHLY_MEAN = "monthly_mean"
    ONE_MIN_WATER_LEVEL = "one_minute_water_level"
    TIDE_PREDICTIONS = "predictions"
    DATUMS = "datums"
    CURRENTS = "currents"
    CURRENT_PREDICTIONS = "currents_predictions"


class Datum(StrEnum):
    """Reference water-level baselines."""

    CRD = "CRD"
    IGLD = "IGLD"
    LWD = "LWD"
    MHHW = "MHHW"
    MHW = "MHW"
    MTL = "MTL"
    MSL = "MSL"
    MLW = "MLW"
    MLLW = "MLLW"
    NAVD = "NAVD"
    STND = "STND"


class TimeZone(StrEnum):
    """Time zone the API reports timestamps in."""

    GMT = "gmt"
    LST = "lst"
    LST_LDT = "lst_ldt"


class ResponseFormat(StrEnum):
    """Body format of the data getter response."""

    JSON = "json"
    CSV = "csv"
    XML = "xml"


# =============================================================================
# Request parameters
# =============================================================================

_DATE_KEYWORDS = frozenset({"today", "latest", "recent"})
_DATE_PATTERN = re.compile(r"^(\d{8}|\d{2}/\d{2}/\d{4})( \d{2}:\d{2})?$")


class RequestParams(BaseModel):
    """
    Every query parameter the data getter accepts.

    Unset fields are ``None``. Layers are combined with :meth:`over`, where
    the receiving instance wins, so the usual chain reads::

        caller.over(operation_defaults).over(library_defaults)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    product: Product | None = None
    format: ResponseFormat | None = None
    time_zone: TimeZone | None = None
    units: MeasurementSystem | None = None
    date: str | None = None
    begin_date: str | None = None
    end_date: str | None = None
    range: int | None = Field(default=None, gt=0, description="Hours of data")
    datum: Datum | None = None
    interval: str | int | None = None
    bin: int | None = None
    vel_type: str | None = None
    application: str | None = None

    @field_validator("date", "begin_date", "end_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            return value.strftime("%Y%m%d %H:%M")
        if isinstance(value, datetime.date):
            return value.strftime("%Y%m%d")
        if isinstance(value, str) and value not in _DATE_KEYWORDS:
            if not _DATE_PATTERN.match(value):
                msg = f"Unrecognized date {value!r}; use a date, YYYYMMDD, or one of {sorted(_DATE_KEYWORDS)}"
                raise ValueError(msg)
        return value

    def over(self, base: RequestParams) -> RequestParams:
        """Return a copy where fields set here take precedence over ``base``."""
        merged = base.model_dump(exclude_none=True)
        merged.update(self.model_dump(exclude_none=True))
        return RequestParams.model_validate(merged)

    def to_query(self) -> dict[str, str]:
        """Render set fields as wire strings."""
        return {key: str(value) for key, value in self.model_dump(exclude_none=True).items()}


# =============================================================================
# Station metadata
# =============================================================================


class StationMetadata(BaseModel):
    """Name and position of a CO-OPS station."""

    id: str
    name: str
    state: str | None = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    utc_offset_hours: float | None = Field(
        default=None, ge=-12, le=14, description="Local standard time offset from UTC"
    )
