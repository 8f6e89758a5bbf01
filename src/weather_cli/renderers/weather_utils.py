"""Weather formatting helpers shared by every template.

Pure functions from raw record fields to display strings, plus the static
lookup tables they read. No I/O, no state.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import NamedTuple

# OpenWeatherMap icon codes (https://openweathermap.org/weather-conditions)
ICON_SYMBOLS: MappingProxyType[str, str] = MappingProxyType(
    {
        # clear
        "01d": "\u2600\ufe0f",
        "01n": "\U0001f319",
        # clouds
        "02d": "\u26c5",
        "02n": "\u26c5",
        "03d": "\u2601\ufe0f",
        "03n": "\u2601\ufe0f",
        "04d": "\u2601\ufe0f",
        "04n": "\u2601\ufe0f",
        # rain
        "09d": "\U0001f327\ufe0f",
        "09n": "\U0001f327\ufe0f",
        "10d": "\U0001f326\ufe0f",
        "10n": "\U0001f326\ufe0f",
        # thunder
        "11d": "\u26c8\ufe0f",
        "11n": "\u26c8\ufe0f",
        # snow
        "13d": "\u2744\ufe0f",
        "13n": "\u2744\ufe0f",
        # mist
        "50d": "\U0001f32b\ufe0f",
        "50n": "\U0001f32b\ufe0f",
    }
)
FALLBACK_SYMBOL = "\U0001f308"

MOON_PHASE_PLACEHOLDER = "\U0001f313"

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip


class Feeling(NamedTuple):
    label: str
    glyph: str
    color: str


class TemperatureBand(NamedTuple):
    upper_c: float
    color: str
    css_color: str


# Buckets are checked in order with ``celsius < upper``: a value exactly on a
# threshold falls into the next higher bucket.
FEELINGS: tuple[tuple[float, Feeling], ...] = (
    (-10, Feeling("Freezing", "\U0001f976", "red")),
    (0, Feeling("Very Cold", "\U0001f9ca", "bright_blue")),
    (10, Feeling("Cold", "\U0001f32c\ufe0f", "blue")),
    (20, Feeling("Cool", "\U0001f60e", "green")),
    (30, Feeling("Warm", "\U0001f324\ufe0f", "yellow")),
    (40, Feeling("Hot", "\U0001f525", "bright_yellow")),
    (math.inf, Feeling("Extremely Hot", "\U0001f975", "red")),
)

# One table for both output targets so terminal and HTML colors never disagree.
TEMPERATURE_BANDS: tuple[TemperatureBand, ...] = (
    TemperatureBand(0, "bright_blue", "#3498db"),
    TemperatureBand(10, "blue", "#2980b9"),
    TemperatureBand(20, "bright_green", "#27ae60"),
    TemperatureBand(30, "yellow", "#f39c12"),
    TemperatureBand(40, "bright_yellow", "#e67e22"),
    TemperatureBand(math.inf, "red", "#e74c3c"),
)

GAUGE_MIN_C = -20.0
GAUGE_MAX_C = 40.0
GAUGE_WIDTH = 20

BAR_FILLED = "\u2588"
BAR_EMPTY = "\u2591"


def weather_symbol(icon_code: str) -> str:
    """Map an API icon code (``01d``, ``10n``...) to a glyph; unknown codes get a fallback."""
    return ICON_SYMBOLS.get(icon_code, FALLBACK_SYMBOL)


def format_wind_direction(degrees: float) -> str:
    """16-point compass label for a bearing in degrees (any value, wrapped mod 360)."""
    index = math.floor(((degrees % 360) + 11.25) / 22.5) % 16
    return COMPASS_POINTS[index]


def format_wind_speed(speed_mps: float) -> str:
    return f"{speed_mps:.1f} m/s"


def format_cloudiness(cloudiness_pct: int) -> str:
    """Describe cloud cover percentage (0-100)."""
    if cloudiness_pct == 0:
        return "Clear sky"
    if 1 <= cloudiness_pct <= 25:
        return "Mostly clear"
    if 26 <= cloudiness_pct <= 50:
        return "Partly cloudy"
    if 51 <= cloudiness_pct <= 75:
        return "Mostly cloudy"
    if 76 <= cloudiness_pct <= 100:
        return "Overcast"
    return "Unknown"


def format_visibility(visibility_m: int | None) -> str:
    """``10.0 km`` at or above 1000 m, whole metres below, ``N/A`` when absent."""
    if visibility_m is None:
        return "N/A"
    if visibility_m >= 1000:
        return f"{visibility_m / 1000:.1f} km"
    return f"{visibility_m} m"


def format_humidity(humidity_pct: int) -> str:
    return f"{humidity_pct}%"


def format_pressure(pressure_hpa: int) -> str:
    return f"{pressure_hpa} hPa"


def temperature_feeling(celsius: float) -> Feeling:
    """Subjective label for a Celsius temperature."""
    for upper, feeling in FEELINGS:
        if celsius < upper:
            return feeling
    return FEELINGS[-1][1]


def format_temperature_feeling(celsius: float, *, styled: bool = False) -> str:
    """Glyph and label, e.g. ``🌤️ Warm``. ``styled`` wraps the glyph in rich color markup."""
    feeling = temperature_feeling(celsius)
    glyph = f"[{feeling.color}]{feeling.glyph}[/{feeling.color}]" if styled else feeling.glyph
    return f"{glyph} {feeling.label}"


def temperature_band(celsius: float) -> TemperatureBand:
    for band in TEMPERATURE_BANDS:
        if celsius < band.upper_c:
            return band
    return TEMPERATURE_BANDS[-1]


def temperature_color(celsius: float) -> str:
    """Terminal (rich) color name for a Celsius temperature."""
    return temperature_band(celsius).color


def temperature_css_color(celsius: float) -> str:
    """CSS hex color for a Celsius temperature."""
    return temperature_band(celsius).css_color


def _gauge_fraction(celsius: float) -> float:
    clamped = min(max(celsius, GAUGE_MIN_C), GAUGE_MAX_C)
    return (clamped - GAUGE_MIN_C) / (GAUGE_MAX_C - GAUGE_MIN_C)


def gauge_cells(celsius: float, width: int = GAUGE_WIDTH) -> tuple[int, int]:
    """Filled/empty cell counts for the temperature gauge; always sums to ``width``."""
    filled = min(math.floor(_gauge_fraction(celsius) * width), width)
    return filled, width - filled


def gauge_percent(celsius: float) -> float:
    """Temperature gauge fill as a percentage (0-100), for HTML."""
    return round(_gauge_fraction(celsius) * 100, 1)


def format_gauge_bar(celsius: float, width: int = GAUGE_WIDTH, color: str | None = None) -> str:
    """Temperature gauge as rich markup, e.g. ``[████░░░░]``."""
    filled, empty = gauge_cells(celsius, width)
    return "[" + _bar(filled, empty, color) + "]"


def _progress_fraction(value: float, maximum: float) -> float:
    if maximum <= 0:
        return 0.0
    return min(max(value / maximum, 0.0), 1.0)


def progress_cells(value: float, maximum: float, width: int) -> tuple[int, int]:
    """Filled/empty cell counts for ``value`` out of ``maximum``, clamped to [0, 1]."""
    filled = round(_progress_fraction(value, maximum) * width)
    return filled, width - filled


def format_progress_bar(value: float, maximum: float = 100, width: int = GAUGE_WIDTH) -> str:
    """Percent bar as rich markup, e.g. ``[██████░░░░] 60%``."""
    filled, empty = progress_cells(value, maximum, width)
    percent = round(_progress_fraction(value, maximum) * 100)
    return "[" + _bar(filled, empty, "bright_blue") + f"] {percent}%"


def _bar(filled: int, empty: int, color: str | None) -> str:
    full = BAR_FILLED * filled
    if color and full:
        full = f"[{color}]{full}[/{color}]"
    rest = f"[dim]{BAR_EMPTY * empty}[/dim]" if empty else ""
    return full + rest
