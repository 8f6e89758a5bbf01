"""OpenWeatherMap current-weather data source.

Public API:
  - current: fetch_current_weather, fetch_current_weather_by_coords, parse_current_weather
  - client: API URL, API-key validation
"""

from weather_cli.datasources.openweather.client import OPENWEATHER_CURRENT_URL, require_api_key
from weather_cli.datasources.openweather.current import (
    fetch_current_weather,
    fetch_current_weather_by_coords,
    parse_current_weather,
)

__all__ = [
    "OPENWEATHER_CURRENT_URL",
    "fetch_current_weather",
    "fetch_current_weather_by_coords",
    "parse_current_weather",
    "require_api_key",
]
