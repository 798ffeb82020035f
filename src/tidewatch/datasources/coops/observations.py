"""Latest observed conditions from the data getter.

Each operation asks for ``date=latest`` of one product and shapes the first
record of the ``data`` array.
"""

from __future__ import annotations

from typing import Any

from tidewatch.datasources.coops import client
from tidewatch.schemas import Datum, MeasurementSystem, Product, RequestParams
from tidewatch.shaping import (
    FormattedMeasurement,
    FormattedWindObservation,
    extract_records,
    shape_measurement,
    shape_wind,
)
from tidewatch.units import UnitSymbolSet, symbols_for


def _latest(
    station_id: str | int,
    product: Product,
    units: MeasurementSystem | None,
    timeout: float | None,
    **extra: Any,
) -> tuple[dict[str, Any], UnitSymbolSet]:
    """Fetch the latest record of ``product`` and the symbols for its units."""
    request: RequestParams = client.resolve_params(
        {"units": units}, product=product, date="latest", **extra
    )
    payload = client.get(station_id, request, timeout=timeout)
    records = extract_records(
        payload, "data", station_id=station_id, operation=product.value.replace("_", " ")
    )
    return records[0], symbols_for(request.units)


def current_water_level(
    station_id: str | int,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> FormattedMeasurement:
    """Latest water level relative to mean lower low water."""
    record, symbols = _latest(station_id, Product.WATER_LEVEL, units, timeout, datum=Datum.MLLW)
    return shape_measurement(record, symbols.height)


def current_air_temperature(
    station_id: str | int,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> FormattedMeasurement:
    """Latest air temperature."""
    record, symbols = _latest(station_id, Product.AIR_TEMP, units, timeout)
    return shape_measurement(record, symbols.degree)


def current_water_temperature(
    station_id: str | int,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> FormattedMeasurement:
    """Latest water temperature."""
    record, symbols = _latest(station_id, Product.WATER_TEMP, units, timeout)
    return shape_measurement(record, symbols.degree)


def current_air_pressure(
    station_id: str | int,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> FormattedMeasurement:
    """Latest barometric pressure (millibars in either system)."""
    record, symbols = _latest(station_id, Product.AIR_PRESSURE, units, timeout)
    return shape_measurement(record, symbols.pressure)


def current_wind(
    station_id: str | int,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> FormattedWindObservation:
    """Latest wind speed, gust and compass direction."""
    record, symbols = _latest(station_id, Product.WIND, units, timeout)
    return shape_wind(record, symbols.speed)
