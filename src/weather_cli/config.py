"""
Application settings.

Read from environment variables (prefix ``WEATHER_``) and an optional ``.env``
file. The API key is also accepted as ``OPENWEATHER_API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_cli.exceptions import ConfigurationError
from weather_cli.schemas import DisplayTemplate, TemperatureUnit

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "weather-cli"
    debug: bool = False

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("weather_api_key", "openweather_api_key"),
    )
    api_url: str = OPENWEATHER_CURRENT_URL
    request_timeout: float = 10.0

    web_host: str = "127.0.0.1"
    web_port: int = Field(default=8080, ge=1, le=65535)

    unit: TemperatureUnit = TemperatureUnit.CELSIUS
    template: DisplayTemplate = DisplayTemplate.DEFAULT

    @field_validator("unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TemperatureUnit.parse(value)
        return value

    @field_validator("template", mode="before")
    @classmethod
    def _lower_template(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once.

    Raises:
        ConfigurationError: an environment or .env value failed validation.
    """
    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc
