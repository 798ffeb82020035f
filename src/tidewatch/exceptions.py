"""
Error taxonomy.

- ``TransportError``: network or HTTP failure, the ``requests`` exception
  raised by the transport, re-exported here under a descriptive name.
- ``UpstreamShapeError``: the response parsed but does not carry the data
  the operation needs.
- ``ValidationError``: input outside what an operation accepts.
"""

from __future__ import annotations

import requests

TransportError = requests.RequestException


class TidewatchError(Exception):
    """Base class for errors raised by tidewatch itself."""


class UpstreamShapeError(TidewatchError):
    """The upstream payload is missing its data collection, or it is empty."""

    def __init__(
        self,
        message: str,
        *,
        station_id: str | int,
        operation: str,
        upstream_message: str | None = None,
    ) -> None:
        if upstream_message:
            message = f"{message} (upstream: {upstream_message})"
        super().__init__(message)
        self.station_id = station_id
        self.operation = operation
        self.upstream_message = upstream_message


class ValidationError(TidewatchError, ValueError):
    """An input value is out of range or cannot be interpreted."""
