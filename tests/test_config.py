"""Tests for application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from weather_cli.config import OPENWEATHER_CURRENT_URL, Settings, get_settings
from weather_cli.exceptions import ConfigurationError
from weather_cli.schemas import DisplayTemplate, TemperatureUnit

if TYPE_CHECKING:
    from pathlib import Path


class TestSettingsDefaults:
    """Values with a clean environment."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.app_name == "weather-cli"
        assert settings.debug is False
        assert settings.api_key is None
        assert settings.api_url == OPENWEATHER_CURRENT_URL
        assert settings.request_timeout == 10.0
        assert settings.web_host == "127.0.0.1"
        assert settings.web_port == 8080
        assert settings.unit is TemperatureUnit.CELSIUS
        assert settings.template is DisplayTemplate.DEFAULT


class TestSettingsFromEnvironment:
    """Environment variables and .env."""

    def test_weather_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "abc123")
        assert Settings().api_key == "abc123"

    def test_openweather_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENWEATHER_API_KEY", "xyz789")
        assert Settings().api_key == "xyz789"

    def test_weather_api_key_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_API_KEY", "first")
        monkeypatch.setenv("OPENWEATHER_API_KEY", "second")
        assert Settings().api_key == "first"

    def test_unit_short_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_UNIT", "F")
        assert Settings().unit is TemperatureUnit.FAHRENHEIT

    def test_bad_unit_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_UNIT", "rankine")
        with pytest.raises(ValidationError):
            Settings()

    def test_template_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_TEMPLATE", "Compact")
        assert Settings().template is DisplayTemplate.COMPACT

    def test_port_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_WEB_PORT", "70000")
        with pytest.raises(ValidationError):
            Settings()

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("WEATHER_API_KEY=from-dotenv\nWEATHER_WEB_PORT=9090\n")
        settings = Settings()
        assert settings.api_key == "from-dotenv"
        assert settings.web_port == 9090


class TestGetSettings:
    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_invalid_environment_is_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WEATHER_UNIT", "rankine")
        with pytest.raises(ConfigurationError, match="unit: .*Unknown temperature unit: rankine"):
            get_settings()

    def test_invalid_port_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_WEB_PORT", "70000")
        with pytest.raises(ConfigurationError, match="web_port"):
            get_settings()

    def test_failure_is_not_cached(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_UNIT", "rankine")
        with pytest.raises(ConfigurationError):
            get_settings()
        monkeypatch.setenv("WEATHER_UNIT", "f")
        assert get_settings().unit is TemperatureUnit.FAHRENHEIT
