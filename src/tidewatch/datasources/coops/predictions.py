"""Tide predictions from the data getter."""

from __future__ import annotations

from datetime import date as Date

from tidewatch.datasources.coops import client
from tidewatch.schemas import Datum, MeasurementSystem, Product
from tidewatch.shaping import FormattedMeasurement, extract_records, shape_predictions
from tidewatch.units import symbols_for


def tide_predictions(
    station_id: str | int,
    date: str | Date | None = None,
    units: MeasurementSystem | None = None,
    *,
    timeout: float | None = None,
) -> list[FormattedMeasurement]:
    """
    High/low tide predictions for one day (defaults to today).

    Args:
        station_id: CO-OPS station ID.
        date: ``datetime.date``, ``YYYYMMDD`` or ``"today"``.
        units: Measurement system (defaults to settings, imperial out of the box).
        timeout: Per-request timeout in seconds.

    Returns:
        Predictions in upstream order, ``kind`` set to ``"H"`` or ``"L"``.

    Raises:
        UpstreamShapeError: If the response has no ``predictions``.
    """
    request = client.resolve_params(
        {"date": date, "units": units},
        product=Product.TIDE_PREDICTIONS,
        date="today",
        datum=Datum.MLLW,
        interval="hilo",
    )
    payload = client.get(station_id, request, timeout=timeout)
    records = extract_records(
        payload, "predictions", station_id=station_id, operation="tide predictions"
    )
    return shape_predictions(records, symbols_for(request.units).height)
