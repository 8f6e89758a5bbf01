"""
Domain models for weather-cli.

Pydantic models for the OpenWeatherMap "current weather" payload. Field names
are ours; aliases map the upstream JSON keys so a response body validates
directly into a ``WeatherRecord``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasPath, BaseModel, ConfigDict, Field

from weather_cli.exceptions import PreconditionError, UnknownUnitError

KELVIN_OFFSET = 273.15

# =============================================================================
# Enums
# =============================================================================


class TemperatureUnit(StrEnum):
    """Display unit for temperatures. Records always store Kelvin."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        return _UNIT_SYMBOLS[self]

    @classmethod
    def parse(cls, token: str) -> TemperatureUnit:
        """Parse ``c``/``celsius``, ``f``/``fahrenheit``, ``k``/``kelvin`` (any case)."""
        unit = _UNIT_TOKENS.get(token.strip().lower())
        if unit is None:
            raise UnknownUnitError(token)
        return unit


_UNIT_SYMBOLS = {
    TemperatureUnit.CELSIUS: "\u00b0C",
    TemperatureUnit.FAHRENHEIT: "\u00b0F",
    TemperatureUnit.KELVIN: "K",
}

_UNIT_TOKENS = {
    "c": TemperatureUnit.CELSIUS,
    "celsius": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.FAHRENHEIT,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
    "k": TemperatureUnit.KELVIN,
    "kelvin": TemperatureUnit.KELVIN,
}


class DisplayTemplate(StrEnum):
    """Terminal layouts. HTML is a separate output target, not a template."""

    DEFAULT = "default"
    COMPACT = "compact"
    DETAILED = "detailed"
    MINIMAL = "minimal"


# =============================================================================
# Weather record
# =============================================================================


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Coordinates(_Model):
    latitude: float = Field(..., alias="lat", ge=-90, le=90)
    longitude: float = Field(..., alias="lon", ge=-180, le=180)


class WeatherCondition(_Model):
    """One entry of the upstream ``weather`` array."""

    condition_id: int = Field(..., alias="id")
    main_label: str = Field(..., alias="main")
    description: str
    icon_code: str = Field(..., alias="icon")


class TemperatureData(_Model):
    """The upstream ``main`` block. Temperatures in Kelvin."""

    current_kelvin: float = Field(..., alias="temp")
    feels_like_kelvin: float = Field(..., alias="feels_like")
    min_kelvin: float = Field(..., alias="temp_min")
    max_kelvin: float = Field(..., alias="temp_max")
    pressure_hpa: int = Field(..., alias="pressure", ge=0)
    humidity_pct: int = Field(..., alias="humidity", ge=0)
    sea_level_hpa: int | None = Field(default=None, alias="sea_level")
    ground_level_hpa: int | None = Field(default=None, alias="grnd_level")


class WindData(_Model):
    speed_mps: float = Field(..., alias="speed")
    direction_degrees: int = Field(..., alias="deg")
    gust_mps: float | None = Field(default=None, alias="gust")


class SystemData(_Model):
    country_code: str = Field(default="", alias="country")
    sunrise_epoch: int = Field(..., alias="sunrise")
    sunset_epoch: int = Field(..., alias="sunset")


class WeatherRecord(_Model):
    """Snapshot of current weather for one location at one fetch time."""

    coordinates: Coordinates = Field(..., alias="coord")
    conditions: tuple[WeatherCondition, ...] = Field(..., alias="weather")
    temperature: TemperatureData = Field(..., alias="main")
    wind: WindData
    cloudiness_pct: int = Field(..., validation_alias=AliasPath("clouds", "all"))
    system: SystemData = Field(..., alias="sys")
    location_name: str = Field(..., alias="name")
    visibility_meters: int | None = Field(default=None, alias="visibility")
    utc_offset_seconds: int = Field(default=0, alias="timezone")

    @property
    def primary_condition(self) -> WeatherCondition:
        """The first (authoritative) condition.

        Raises:
            PreconditionError: if the record carries no conditions.
        """
        if not self.conditions:
            raise PreconditionError(
                f"Weather record for '{self.location_name}' has no conditions to display"
            )
        return self.conditions[0]

    @property
    def display_location(self) -> str:
        """``"Name, CC"`` or just the name when the country code is empty."""
        if self.system.country_code:
            return f"{self.location_name}, {self.system.country_code}"
        return self.location_name

    @property
    def current_celsius(self) -> float:
        return self.temperature.current_kelvin - KELVIN_OFFSET

    @property
    def feels_like_celsius(self) -> float:
        return self.temperature.feels_like_kelvin - KELVIN_OFFSET

    @property
    def min_celsius(self) -> float:
        return self.temperature.min_kelvin - KELVIN_OFFSET

    @property
    def max_celsius(self) -> float:
        return self.temperature.max_kelvin - KELVIN_OFFSET
