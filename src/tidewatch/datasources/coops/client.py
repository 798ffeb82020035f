"""NOAA CO-OPS API client constants and the generic data getter request.

API docs:
  - Data getter: https://api.tidesandcurrents.noaa.gov/api/prod/
  - Metadata: https://api.tidesandcurrents.noaa.gov/mdapi/prod/
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import pydantic

from tidewatch.config import get_settings
from tidewatch.exceptions import ValidationError
from tidewatch.schemas import RequestParams, ResponseFormat
from tidewatch.services.http import session

logger = logging.getLogger(__name__)

DATA_GETTER_API = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
METADATA_API = "https://api.tidesandcurrents.noaa.gov/mdapi/prod/webapi/stations"


def today_yyyymmdd() -> str:
    """Today's UTC date in the API's ``YYYYMMDD`` form."""
    return datetime.now(UTC).strftime("%Y%m%d")


def library_defaults() -> RequestParams:
    """Library-wide request defaults, from settings."""
    settings = get_settings()
    return RequestParams(
        format=settings.response_format,
        time_zone=settings.time_zone,
        units=settings.units,
        datum=settings.datum,
        application=settings.application,
    )


def coerce_params(params: RequestParams | Mapping[str, Any] | None) -> RequestParams:
    """Accept a ``RequestParams`` or a plain mapping; reject unknown keys and values."""
    if params is None:
        return RequestParams()
    if isinstance(params, RequestParams):
        return params
    try:
        return RequestParams.model_validate(dict(params))
    except pydantic.ValidationError as exc:
        raise ValidationError(f"Invalid request parameters: {exc}") from exc


def resolve_params(
    params: RequestParams | Mapping[str, Any] | None = None,
    **operation_defaults: Any,
) -> RequestParams:
    """
    Combine caller, operation and library parameters.

    Precedence: caller-supplied value, else operation default, else the
    library-wide default from settings.
    """
    operation = coerce_params(operation_defaults)
    return coerce_params(params).over(operation).over(library_defaults())


def get(
    station_id: str | int,
    params: RequestParams | Mapping[str, Any] | None = None,
    *,
    timeout: float | None = None,
) -> Any:
    """
    Call the data getter for a station.

    Args:
        station_id: CO-OPS station ID (see https://tidesandcurrents.noaa.gov/stations.html).
        params: Query parameters; unset ones fall back to library defaults.
        timeout: Per-request timeout in seconds (defaults to settings).

    Returns:
        Parsed JSON body, or the raw text for csv/xml formats.

    Raises:
        requests.RequestException: On network failure or non-2xx status.
    """
    resolved = resolve_params(params)
    query = {"station": str(station_id), **resolved.to_query()}
    logger.debug("GET %s %s", DATA_GETTER_API, query)

    resp = session.get(
        DATA_GETTER_API, params=query, timeout=timeout or get_settings().request_timeout
    )
    resp.raise_for_status()
    if resolved.format is ResponseFormat.JSON:
        return resp.json()
    return resp.text
