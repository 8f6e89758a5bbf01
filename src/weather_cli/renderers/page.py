"""Standalone HTML weather page.

Produces a complete document (``<!DOCTYPE html>`` through ``</html>``) served
by the local web server. Values are precomputed here with the shared helpers;
the Jinja2 environment autoescapes every one of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_cli.renderers import render_template
from weather_cli.renderers.date_utils import (
    format_coordinates,
    format_sun_time,
    format_updated,
    format_utc_offset,
)
from weather_cli.renderers.units import to_display_temperature
from weather_cli.renderers.weather_utils import (
    format_cloudiness,
    format_humidity,
    format_pressure,
    format_temperature_feeling,
    format_visibility,
    format_wind_direction,
    format_wind_speed,
    gauge_percent,
    temperature_css_color,
    weather_symbol,
)

if TYPE_CHECKING:
    from datetime import datetime

    from weather_cli.schemas import TemperatureUnit, WeatherRecord


def build_weather_page_html(record: WeatherRecord, unit: TemperatureUnit, now: datetime) -> str:
    """Build the full HTML page for one record."""
    condition = record.primary_condition
    temp = record.temperature
    offset = record.utc_offset_seconds
    celsius = record.current_celsius

    return render_template(
        "weather_page.html.j2",
        location=record.display_location,
        coordinates=format_coordinates(record.coordinates.latitude, record.coordinates.longitude),
        timezone=format_utc_offset(offset),
        symbol=weather_symbol(condition.icon_code),
        description=condition.description,
        temperature=to_display_temperature(temp.current_kelvin, unit),
        temperature_color=temperature_css_color(celsius),
        feels_like=to_display_temperature(temp.feels_like_kelvin, unit),
        feeling=format_temperature_feeling(celsius),
        temp_min=to_display_temperature(temp.min_kelvin, unit),
        temp_max=to_display_temperature(temp.max_kelvin, unit),
        gauge_pct=gauge_percent(celsius),
        humidity=format_humidity(temp.humidity_pct),
        pressure=format_pressure(temp.pressure_hpa),
        wind_speed=format_wind_speed(record.wind.speed_mps),
        wind_direction=format_wind_direction(record.wind.direction_degrees),
        wind_gust=(
            format_wind_speed(record.wind.gust_mps) if record.wind.gust_mps is not None else None
        ),
        cloudiness_pct=min(max(record.cloudiness_pct, 0), 100),
        cloudiness=format_cloudiness(record.cloudiness_pct),
        visibility=format_visibility(record.visibility_meters),
        sunrise=format_sun_time(record.system.sunrise_epoch, offset),
        sunset=format_sun_time(record.system.sunset_epoch, offset),
        updated=format_updated(now),
    )
