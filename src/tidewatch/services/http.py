"""
Shared HTTP client with a default timeout.

Provides a pre-configured ``requests.Session`` used by every datasource.
Upstream failures are not retried: a ``requests`` exception or a non-2xx
status surfaces to the caller of the operation that triggered it. Callers
that want retries can build their own session with a ``Retry`` strategy.

Usage::

    from tidewatch.services.http import session

    resp = session.get("https://api.tidesandcurrents.noaa.gov/api/prod/datagetter", params=...)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from tidewatch import __version__

#: No retries; errors go straight to the caller.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"tidewatch/{__version__} (+https://tidesandcurrents.noaa.gov/api/)"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with an adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``, i.e. none).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
