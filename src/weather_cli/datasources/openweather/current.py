"""Current weather from the OpenWeatherMap ``/data/2.5/weather`` endpoint."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote_plus

import requests
from pydantic import ValidationError

from weather_cli.datasources.openweather.client import OPENWEATHER_CURRENT_URL, require_api_key
from weather_cli.exceptions import (
    MalformedResponseError,
    NotFoundError,
    RateLimitedError,
    RequestError,
    UnauthorizedError,
)
from weather_cli.schemas import WeatherRecord
from weather_cli.services.http import session

logger = logging.getLogger(__name__)


def fetch_current_weather(
    city: str,
    api_key: str | None,
    *,
    url: str = OPENWEATHER_CURRENT_URL,
    timeout: float | None = None,
) -> WeatherRecord:
    """
    Fetch current weather for a city name.

    Args:
        city: City name, optionally ``"City,CC"``.
        api_key: OpenWeatherMap API key.
        url: Endpoint override (tests, proxies).
        timeout: Per-request timeout; the session default applies when None.

    Returns:
        Validated ``WeatherRecord`` (temperatures in Kelvin).
    """
    payload = _get_json(
        {"q": city},
        api_key,
        url=url,
        timeout=timeout,
        not_found=f"City '{city}' not found. Please check the spelling.",
    )
    return parse_current_weather(payload)


def fetch_current_weather_by_coords(
    lat: float,
    lon: float,
    api_key: str | None,
    *,
    url: str = OPENWEATHER_CURRENT_URL,
    timeout: float | None = None,
) -> WeatherRecord:
    """Fetch current weather for a latitude/longitude pair."""
    payload = _get_json(
        {"lat": lat, "lon": lon},
        api_key,
        url=url,
        timeout=timeout,
        not_found=f"No weather data for coordinates ({lat}, {lon}).",
    )
    return parse_current_weather(payload)


def parse_current_weather(payload: Any) -> WeatherRecord:
    """Validate a raw response body into a ``WeatherRecord``.

    Raises:
        MalformedResponseError: schema mismatch, empty location name, or no conditions.
    """
    try:
        record = WeatherRecord.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponseError(f"Invalid response from API: {exc.error_count()} field error(s)") from exc

    if not record.location_name.strip():
        raise MalformedResponseError("Invalid response from API: empty location name")
    if not record.conditions:
        raise MalformedResponseError("Invalid response from API: no weather conditions")
    return record


def _get_json(
    params: dict[str, Any],
    api_key: str | None,
    *,
    url: str,
    timeout: float | None,
    not_found: str,
) -> Any:
    key = require_api_key(api_key)
    logger.debug("GET %s params=%s", url, params)

    try:
        resp = session.get(url, params={**params, "appid": key}, timeout=timeout)
    except requests.RequestException as exc:
        # requests puts the full URL, appid included, into its messages
        raise RequestError(f"Network error: {_redact(str(exc), key)}") from None

    logger.debug("HTTP %s from %s", resp.status_code, url)
    if not resp.ok:
        raise _classify_error(resp, not_found)

    try:
        return resp.json()
    except ValueError as exc:
        raise MalformedResponseError("Invalid response from API: body is not JSON") from exc


def _classify_error(resp: requests.Response, not_found: str) -> RequestError:
    status = resp.status_code
    if status == 401:
        return UnauthorizedError("Invalid API key. Please check your OpenWeatherMap API key.", status)
    if status == 404:
        return NotFoundError(not_found, status)
    if status == 429:
        return RateLimitedError("API rate limit exceeded. Please try again later.", status)
    return RequestError(f"API error ({status}): {resp.text}", status)


def _redact(text: str, api_key: str) -> str:
    for form in {api_key, quote_plus(api_key)}:
        text = text.replace(form, "***")
    return text
