"""Shared fixtures: a realistic OpenWeatherMap payload and the record built from it."""

from __future__ import annotations

import copy
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from weather_cli.config import get_settings
from weather_cli.schemas import WeatherRecord

SAMPLE_PAYLOAD: dict[str, Any] = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 293.15,
        "feels_like": 295.15,
        "temp_min": 288.15,
        "temp_max": 298.15,
        "pressure": 1013,
        "humidity": 65,
    },
    "visibility": 10000,
    "wind": {"speed": 5.0, "deg": 180},
    "clouds": {"all": 0},
    "dt": 1678890000,
    "sys": {"country": "US", "sunrise": 1678867200, "sunset": 1678910400},
    "timezone": 0,
    "id": 2643743,
    "name": "Test City",
    "cod": 200,
}

FIXED_NOW = datetime(2023, 3, 15, 12, 0, 0, tzinfo=UTC)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    """Factory for API payloads; nested dict overrides merge into the sample."""

    def _make(**overrides: Any) -> dict[str, Any]:
        return _merge(copy.deepcopy(SAMPLE_PAYLOAD), overrides)

    return _make


@pytest.fixture
def make_record(make_payload: Callable[..., dict[str, Any]]) -> Callable[..., WeatherRecord]:
    """Factory for validated records, same override rules as ``make_payload``."""

    def _make(**overrides: Any) -> WeatherRecord:
        return WeatherRecord.model_validate(make_payload(**overrides))

    return _make


@pytest.fixture
def record(make_record: Callable[..., WeatherRecord]) -> WeatherRecord:
    return make_record()


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Any) -> Any:
    """Keep real env vars and any local .env out of the settings under test."""
    for name in (
        "WEATHER_API_KEY",
        "OPENWEATHER_API_KEY",
        "WEATHER_UNIT",
        "WEATHER_TEMPLATE",
        "WEATHER_WEB_PORT",
        "WEATHER_WEB_HOST",
        "WEATHER_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
