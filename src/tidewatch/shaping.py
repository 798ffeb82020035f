"""
Response shaping.

Turns the upstream record shapes into the library's output records:

- observation/prediction records ``{"t": ..., "v": ..., "type": ...}``
- wind records ``{"t": ..., "s": ..., "g": ..., "dr": ...}``

Single observations render as ``"<value> <symbol>"``; tide prediction lists
render as ``"<value><symbol>"`` with no separator. Both forms are relied on
by existing consumers, so each path keeps its own rule.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tidewatch.exceptions import UpstreamShapeError, ValidationError
from tidewatch.formatting import display_number, round_value

logger = logging.getLogger(__name__)

# =============================================================================
# Output records
# =============================================================================


@dataclass(frozen=True)
class FormattedMeasurement:
    """A single timestamped magnitude, rounded and rendered with its unit."""

    time: str
    raw_value: float
    value: str
    kind: str | None = None  # "H"/"L" for hilo predictions


@dataclass(frozen=True)
class FormattedWindObservation:
    """Wind speed and gust, each rounded and rendered, plus compass direction."""

    time: str
    raw_speed: float
    speed: str
    raw_gust: float
    gust: str
    direction: str


# =============================================================================
# Payload access
# =============================================================================


def _upstream_message(payload: Any) -> str | None:
    if isinstance(payload, Mapping):
        error = payload.get("error")
        if isinstance(error, Mapping):
            return error.get("message")
        if isinstance(error, str):
            return error
    return None


def extract_records(
    payload: Any,
    key: str,
    *,
    station_id: str | int,
    operation: str,
    missing_message: str | None = None,
) -> list[dict[str, Any]]:
    """
    Pull the data collection out of an upstream payload.

    ``missing_message`` replaces the default text used when ``key`` is absent.

    Raises:
        UpstreamShapeError: If ``key`` is missing or the collection is empty.
    """
    records = payload.get(key) if isinstance(payload, Mapping) else None
    upstream = _upstream_message(payload)

    if records is None:
        logger.warning("Payload for %s at station %s has no %r key", operation, station_id, key)
        msg = missing_message or (
            f"Could not get {operation} for station {station_id}. Is the station ID correct?"
        )
        raise UpstreamShapeError(
            msg, station_id=station_id, operation=operation, upstream_message=upstream
        )

    if not records:
        logger.warning("Payload for %s at station %s is empty", operation, station_id)
        msg = f"No {operation} data returned for station {station_id}."
        raise UpstreamShapeError(
            msg, station_id=station_id, operation=operation, upstream_message=upstream
        )

    return list(records)


def _timestamp(raw: Mapping[str, Any]) -> str:
    timestamp = raw.get("t")
    if not timestamp:
        msg = f"Record has no timestamp: {dict(raw)!r}"
        raise ValidationError(msg)
    return str(timestamp)


def _magnitude(raw: Mapping[str, Any], field: str) -> float:
    value = round_value(raw.get(field))  # type: ignore[arg-type]
    if math.isnan(value):
        msg = f"Non-numeric {field!r} value {raw.get(field)!r} at {raw.get('t')!r}"
        raise ValidationError(msg)
    return value


# =============================================================================
# Shapers
# =============================================================================


def shape_measurement(raw: Mapping[str, Any], symbol: str) -> FormattedMeasurement:
    """Shape one observation: ``{"t", "v"}`` -> ``"<value> <symbol>"``."""
    value = _magnitude(raw, "v")
    return FormattedMeasurement(
        time=_timestamp(raw),
        raw_value=value,
        value=f"{display_number(value)} {symbol}",
        kind=raw.get("type"),
    )


def shape_predictions(
    raws: Iterable[Mapping[str, Any]], symbol: str
) -> list[FormattedMeasurement]:
    """Shape tide predictions in order: ``{"t", "v", "type"}`` -> ``"<value><symbol>"``."""
    shaped = []
    for raw in raws:
        value = _magnitude(raw, "v")
        shaped.append(
            FormattedMeasurement(
                time=_timestamp(raw),
                raw_value=value,
                value=f"{display_number(value)}{symbol}",
                kind=raw.get("type"),
            )
        )
    return shaped


def shape_wind(raw: Mapping[str, Any], symbol: str) -> FormattedWindObservation:
    """Shape one wind record: speed and gust rounded independently."""
    speed = _magnitude(raw, "s")
    gust = _magnitude(raw, "g")
    return FormattedWindObservation(
        time=_timestamp(raw),
        raw_speed=speed,
        speed=f"{display_number(speed)} {symbol}",
        raw_gust=gust,
        gust=f"{display_number(gust)} {symbol}",
        direction=raw.get("dr", ""),
    )
