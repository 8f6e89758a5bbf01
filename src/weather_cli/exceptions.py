"""
Error taxonomy for weather-cli.

Every failure is terminal for the current invocation. Nothing here retries;
``cli.main`` is the only place that turns these into messages and exit codes.
"""

from __future__ import annotations


class WeatherCliError(Exception):
    """Base class for all weather-cli failures."""


class ConfigurationError(WeatherCliError):
    """Missing or invalid configuration (e.g. no API key)."""


class RequestError(WeatherCliError):
    """Network or HTTP failure talking to the weather provider."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(RequestError):
    """Provider rejected the API key (HTTP 401)."""


class NotFoundError(RequestError):
    """Provider does not know the requested location (HTTP 404)."""


class RateLimitedError(RequestError):
    """Provider rate limit exceeded (HTTP 429)."""


class MalformedResponseError(WeatherCliError):
    """Provider answered 2xx but the body is unusable."""


class PreconditionError(WeatherCliError):
    """A record reached the renderer without the data it requires."""


class UnknownUnitError(WeatherCliError, ValueError):
    """Temperature unit token could not be parsed."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown temperature unit: {token}")
        self.token = token


class ServerError(WeatherCliError):
    """The local web server could not be started (e.g. port already in use)."""
