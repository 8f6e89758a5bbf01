"""Terminal templates: default, compact, detailed and minimal.

Each builder returns rich console markup. Strings that come from the API
(location, country, description) go through ``rich.markup.escape`` so a
stray ``[`` can never be read as a style tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.cells import cell_len
from rich.markup import escape
from rich.text import Text

from weather_cli.renderers.date_utils import (
    format_coordinates,
    format_sun_time,
    format_updated,
    format_utc_offset,
)
from weather_cli.renderers.units import to_display_temperature
from weather_cli.renderers.weather_utils import (
    MOON_PHASE_PLACEHOLDER,
    format_cloudiness,
    format_gauge_bar,
    format_humidity,
    format_pressure,
    format_progress_bar,
    format_temperature_feeling,
    format_visibility,
    format_wind_direction,
    format_wind_speed,
    temperature_color,
    weather_symbol,
)

if TYPE_CHECKING:
    from datetime import datetime

    from weather_cli.schemas import TemperatureUnit, WeatherRecord

RULE_WIDTH = 80
SECTION_RULE_WIDTH = 40
DETAIL_COLUMN_WIDTH = 35
BOX_WIDTH = 60
COMPACT_BOX_WIDTH = 48

PROVIDER_CREDIT = "Powered by OpenWeatherMap API"

# Box drawing
H_LINE = "\u2500"
V_LINE = "\u2502"
DOUBLE_H = "\u2550"
DOUBLE_V = "\u2551"

# Glyphs
APP_ICON = "\U0001f324\ufe0f"
PIN = "\U0001f4cd"
CITY = "\U0001f3d9\ufe0f"
MAP = "\U0001f5fa\ufe0f"
CLOCK = "\U0001f550"
THERMOMETER = "\U0001f321\ufe0f"
HAND = "\U0001f91a"
THOUGHT = "\U0001f4ad"
CHART = "\U0001f4ca"
TREND = "\U0001f4c8"
DROPLET = "\U0001f4a7"
BALLOON = "\U0001f388"
WIND = "\U0001f4a8"
CLOUD = "\u2601\ufe0f"
EYE = "\U0001f441\ufe0f"
SUNRISE = "\U0001f305"
SUNSET = "\U0001f307"
MOON = "\U0001f319"
SUN = "\u2600\ufe0f"
REFRESH = "\U0001f504"
ZAP = "\u26a1"


@dataclass(frozen=True)
class _Readings:
    """Display values shared by the templates, computed once per render."""

    symbol: str
    description: str
    headline: str
    temperature: str
    feels_like: str
    daily_range: str
    feeling: str
    color: str
    gauge: str


def _readings(record: WeatherRecord, unit: TemperatureUnit) -> _Readings:
    condition = record.primary_condition
    temp = record.temperature
    color = temperature_color(record.current_celsius)
    return _Readings(
        symbol=weather_symbol(condition.icon_code),
        description=escape(condition.description),
        headline=escape(condition.description.upper()),
        temperature=to_display_temperature(temp.current_kelvin, unit),
        feels_like=to_display_temperature(temp.feels_like_kelvin, unit),
        daily_range=(
            f"{to_display_temperature(temp.min_kelvin, unit)} - "
            f"{to_display_temperature(temp.max_kelvin, unit)}"
        ),
        feeling=format_temperature_feeling(record.current_celsius, styled=True),
        color=color,
        gauge=format_gauge_bar(record.current_celsius, color=color),
    )


# =============================================================================
# Layout helpers
# =============================================================================


def _visible_width(markup: str) -> int:
    return cell_len(Text.from_markup(markup).plain)


def _pad(markup: str, width: int) -> str:
    """Right-pad markup to ``width`` terminal cells (markup tags don't count)."""
    return markup + " " * max(width - _visible_width(markup), 0)


def _center(markup: str, width: int) -> str:
    gap = max(width - _visible_width(markup), 0)
    left = gap // 2
    return " " * left + markup + " " * (gap - left)


def _box_top(title: str, style: str, width: int) -> str:
    head = f"\u250c{H_LINE} {title} "
    fill = max(width + 1 - _visible_width(head), 1)
    return f"[{style}]{head}{H_LINE * fill}\u2510[/{style}]"


def _box_row(content: str, style: str, width: int) -> str:
    border = f"[{style}]{V_LINE}[/{style}]"
    return f"{border} {_pad(content, width - 2)} {border}"


def _box_bottom(style: str, width: int) -> str:
    return f"[{style}]\u2514{H_LINE * width}\u2518[/{style}]"


def _box(title: str, rows: list[str], style: str, width: int = BOX_WIDTH) -> list[str]:
    return [
        _box_top(title, style, width),
        *(_box_row(row, style, width) for row in rows),
        _box_bottom(style, width),
    ]


def _banner(rows: list[str], style: str, width: int = BOX_WIDTH) -> list[str]:
    border = f"[{style}]{DOUBLE_V}[/{style}]"
    return [
        f"[{style}]\u2554{DOUBLE_H * width}\u2557[/{style}]",
        *(f"{border}{row}{border}" for row in rows),
        f"[{style}]\u255a{DOUBLE_H * width}\u255d[/{style}]",
    ]


def _section_heading(title: str) -> list[str]:
    return [f"[bold]{title}[/bold]", f"[dim]{H_LINE * SECTION_RULE_WIDTH}[/dim]"]


def _rule() -> str:
    return f"[cyan]{'=' * RULE_WIDTH}[/cyan]"


# =============================================================================
# Templates
# =============================================================================


def build_default_text(record: WeatherRecord, unit: TemperatureUnit, now: datetime) -> str:
    """Sectioned layout: location, current weather, detail grid, footer."""
    r = _readings(record, unit)

    header = [
        _rule(),
        f"[bold cyan]{APP_ICON}  WEATHER CLI[/bold cyan]",
        _rule(),
        "",
    ]

    location = [
        *_section_heading(f"{PIN} LOCATION"),
        f"  {CITY} [bold green]{escape(record.display_location)}[/bold green]",
        f"  {MAP} Coordinates: "
        f"{format_coordinates(record.coordinates.latitude, record.coordinates.longitude)}",
        f"  {CLOCK} Timezone: {format_utc_offset(record.utc_offset_seconds)}",
        "",
    ]

    current = [
        *_section_heading(f"{THERMOMETER}  CURRENT WEATHER"),
        f"  {r.symbol} [bold]{r.headline}[/bold]",
        f"  {THERMOMETER} Temperature: [bold {r.color}]{r.temperature}[/]",
        f"  {HAND} Feels like: {r.feels_like}",
        f"  {THOUGHT} {r.feeling}",
        f"  {CHART} Daily range: {r.daily_range}",
        f"  {TREND} {r.gauge}",
        "",
    ]

    left_col = [
        f"{DROPLET} Humidity: {format_humidity(record.temperature.humidity_pct)}",
        f"{BALLOON} Pressure: {format_pressure(record.temperature.pressure_hpa)}",
        f"{WIND} Wind: {format_wind_speed(record.wind.speed_mps)} "
        f"{format_wind_direction(record.wind.direction_degrees)}",
        f"{CLOUD} Clouds: {format_cloudiness(record.cloudiness_pct)}",
    ]
    right_col = [
        f"{EYE} Visibility: {format_visibility(record.visibility_meters)}",
        f"{SUNRISE} Sunrise: {format_sun_time(record.system.sunrise_epoch, record.utc_offset_seconds)}",
        f"{SUNSET} Sunset: {format_sun_time(record.system.sunset_epoch, record.utc_offset_seconds)}",
        f"{MOON} Moon: {MOON_PHASE_PLACEHOLDER}",
    ]
    details = [
        *_section_heading(f"{CHART} DETAILED INFORMATION"),
        *(
            f"  {_pad(left, DETAIL_COLUMN_WIDTH)}  {right}"
            for left, right in zip(left_col, right_col, strict=True)
        ),
        "",
    ]

    footer = [
        _rule(),
        f"[dim]{REFRESH} Last updated: {format_updated(now)}[/dim]",
        f"[dim]{ZAP} {PROVIDER_CREDIT}[/dim]",
        _rule(),
    ]

    return "\n".join([*header, *location, *current, *details, *footer])


def build_compact_text(record: WeatherRecord, unit: TemperatureUnit, now: datetime) -> str:
    """Small box: condition, location/humidity/wind, sunrise/sunset."""
    r = _readings(record, unit)
    offset = record.utc_offset_seconds
    rows = [
        f"{r.symbol} [bold]{r.description}[/bold] [bold yellow]{r.temperature}[/bold yellow] "
        f"[dim](feels {r.feels_like})[/dim]",
        "",
        f"{PIN} [bold]{escape(record.location_name)}[/bold] | "
        f"{DROPLET} {format_humidity(record.temperature.humidity_pct)} | "
        f"{WIND} {format_wind_speed(record.wind.speed_mps)}",
        f"{SUNRISE} {format_sun_time(record.system.sunrise_epoch, offset)} | "
        f"{SUNSET} {format_sun_time(record.system.sunset_epoch, offset)}",
    ]
    return "\n".join(_box(f"{APP_ICON} [bold cyan]WEATHER[/bold cyan]", rows, "white", COMPACT_BOX_WIDTH))


def build_detailed_text(record: WeatherRecord, unit: TemperatureUnit, now: datetime) -> str:
    """Everything the default layout shows plus gust, country and sea/ground pressure, boxed."""
    r = _readings(record, unit)
    offset = record.utc_offset_seconds
    wind = record.wind
    temp = record.temperature

    banner = _banner(
        [_center(f"[bold]{APP_ICON}  ADVANCED WEATHER INFORMATION {APP_ICON}[/bold]", BOX_WIDTH)],
        "bright_cyan",
    )

    location = _box(
        f"{PIN} LOCATION",
        [
            f"City: [bold green]{escape(record.location_name)}[/bold green]",
            f"Country: [bold]{escape(record.system.country_code) or 'N/A'}[/bold]",
            "Coordinates: "
            f"{format_coordinates(record.coordinates.latitude, record.coordinates.longitude)}",
            f"Timezone: {format_utc_offset(offset)}",
        ],
        "cyan",
    )

    current = _box(
        f"{THERMOMETER}  CURRENT CONDITIONS",
        [
            f"Condition: {r.symbol} [bold]{r.headline}[/bold]",
            f"Temperature: [bold {r.color}]{r.temperature}[/]",
            f"Feels Like: {r.feels_like}",
            f"Daily Range: {r.daily_range}",
            f"Sensation: {r.feeling}",
            f"Gauge: {r.gauge}",
        ],
        "yellow",
    )

    atmosphere_rows = [
        f"Humidity: [bold blue]{format_humidity(temp.humidity_pct)}[/bold blue]",
        f"Pressure: {format_pressure(temp.pressure_hpa)}",
    ]
    if temp.sea_level_hpa is not None:
        atmosphere_rows.append(f"Sea Level: {format_pressure(temp.sea_level_hpa)}")
    if temp.ground_level_hpa is not None:
        atmosphere_rows.append(f"Ground Level: {format_pressure(temp.ground_level_hpa)}")
    atmosphere_rows += [
        f"Wind Speed: [bold]{format_wind_speed(wind.speed_mps)}[/bold]",
        f"Wind Direction: [bold]{format_wind_direction(wind.direction_degrees)}[/bold] "
        f"({wind.direction_degrees}\u00b0)",
    ]
    if wind.gust_mps is not None:
        atmosphere_rows.append(f"Wind Gust: {format_wind_speed(wind.gust_mps)}")
    atmosphere_rows += [
        f"Cloudiness: [bold]{format_cloudiness(record.cloudiness_pct)}[/bold]",
        f"Cloud Cover: {format_progress_bar(record.cloudiness_pct)}",
        f"Visibility: {format_visibility(record.visibility_meters)}",
    ]
    atmosphere = _box(f"{WIND} ATMOSPHERIC CONDITIONS", atmosphere_rows, "cyan")

    sun_moon = _box(
        f"{SUN}  SUN & MOON",
        [
            f"Sunrise: [bold]{format_sun_time(record.system.sunrise_epoch, offset)}[/bold]",
            f"Sunset: [bold]{format_sun_time(record.system.sunset_epoch, offset)}[/bold]",
            f"Moon Phase: {MOON_PHASE_PLACEHOLDER}",
        ],
        "bright_yellow",
    )

    footer = _banner(
        [
            _pad(f" [dim]{REFRESH} Last updated: {format_updated(now)}[/dim]", BOX_WIDTH),
            _pad(f" [dim]{ZAP} {PROVIDER_CREDIT}[/dim]", BOX_WIDTH),
        ],
        "bright_cyan",
    )

    sections = [banner, location, current, atmosphere, sun_moon, footer]
    return "\n\n".join("\n".join(section) for section in sections)


def build_minimal_text(record: WeatherRecord, unit: TemperatureUnit, now: datetime) -> str:
    """Single line: symbol, description, temperature, location, feeling."""
    r = _readings(record, unit)
    return (
        f"{r.symbol} {r.description} [bold]{r.temperature}[/bold] in "
        f"[bold cyan]{escape(record.location_name)}[/bold cyan] | {r.feeling}"
    )
