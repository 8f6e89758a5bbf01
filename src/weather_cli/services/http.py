"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a default timeout and a
project User-Agent. Retries are switched off: a failed request is reported to
the user as-is.

Usage::

    from weather_cli.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from weather_cli import __version__

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"weather-cli/{__version__}"


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """
    Build a ``requests.Session`` with a no-retry adapter mounted.

    Args:
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
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


#: Module-level session; import and use directly.
session: requests.Session = create_session()
