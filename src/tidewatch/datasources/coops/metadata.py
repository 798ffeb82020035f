"""Station metadata from the CO-OPS metadata API."""

from __future__ import annotations

import logging
from typing import Any

from tidewatch.config import get_settings
from tidewatch.datasources.coops.client import METADATA_API
from tidewatch.schemas import StationMetadata
from tidewatch.services.http import session
from tidewatch.shaping import extract_records

logger = logging.getLogger(__name__)


def fetch_station_record(station_id: str | int, *, timeout: float | None = None) -> dict[str, Any]:
    """Fetch the raw ``stations[0]`` record for a station (with details expanded)."""
    url = f"{METADATA_API}/{station_id}.json"
    logger.debug("GET %s", url)

    resp = session.get(
        url, params={"expand": "details"}, timeout=timeout or get_settings().request_timeout
    )
    resp.raise_for_status()
    stations = extract_records(
        resp.json(),
        "stations",
        station_id=station_id,
        operation="station metadata",
        missing_message=f"Could not get metadata for station {station_id}.",
    )
    return stations[0]


def station_metadata(station_id: str | int, *, timeout: float | None = None) -> StationMetadata:
    """
    Look up a station's name, state and coordinates.

    Raises:
        UpstreamShapeError: If the response carries no station record.
        requests.RequestException: On network failure or non-2xx status.
    """
    record = fetch_station_record(station_id, timeout=timeout)
    return StationMetadata(
        id=str(station_id),
        name=record["name"],
        state=record.get("state") or None,
        latitude=record["lat"],
        longitude=record["lng"],
        utc_offset_hours=record.get("timezonecorr"),
    )
