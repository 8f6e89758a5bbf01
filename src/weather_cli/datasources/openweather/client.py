"""OpenWeatherMap API client constants and credential checks.

API docs: https://openweathermap.org/current
"""

from __future__ import annotations

from weather_cli.config import OPENWEATHER_CURRENT_URL
from weather_cli.exceptions import ConfigurationError

__all__ = ["API_KEY_SIGNUP_URL", "OPENWEATHER_CURRENT_URL", "PLACEHOLDER_API_KEY", "require_api_key"]

API_KEY_SIGNUP_URL = "https://openweathermap.org/api"

# Value shipped in example .env files
PLACEHOLDER_API_KEY = "your_api_key_here"


def require_api_key(api_key: str | None) -> str:
    """Return a usable API key or raise ``ConfigurationError``."""
    if api_key is None:
        raise ConfigurationError(
            "No API key found. Please set WEATHER_API_KEY or OPENWEATHER_API_KEY "
            f"environment variable.\nGet a free API key at: {API_KEY_SIGNUP_URL}"
        )
    key = api_key.strip()
    if not key or key == PLACEHOLDER_API_KEY:
        raise ConfigurationError("Invalid API key. Please set a valid OpenWeatherMap API key.")
    return key
