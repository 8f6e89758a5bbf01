"""
Presentation façade.

Picks the renderer for a template and hands back a finished string. Callers
decide where it goes (rich console or HTTP response body).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from types import MappingProxyType

from weather_cli.renderers.date_utils import utc_now
from weather_cli.renderers.page import build_weather_page_html
from weather_cli.renderers.terminal import (
    build_compact_text,
    build_default_text,
    build_detailed_text,
    build_minimal_text,
)
from weather_cli.schemas import DisplayTemplate, TemperatureUnit, WeatherRecord

TextBuilder = Callable[[WeatherRecord, TemperatureUnit, datetime], str]

_TEXT_BUILDERS: MappingProxyType[DisplayTemplate, TextBuilder] = MappingProxyType(
    {
        DisplayTemplate.DEFAULT: build_default_text,
        DisplayTemplate.COMPACT: build_compact_text,
        DisplayTemplate.DETAILED: build_detailed_text,
        DisplayTemplate.MINIMAL: build_minimal_text,
    }
)


def render(
    record: WeatherRecord,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    template: DisplayTemplate = DisplayTemplate.DEFAULT,
    *,
    now: datetime | None = None,
) -> str:
    """Render a record as rich console markup using one terminal template.

    Args:
        record: Weather snapshot to display.
        unit: Unit for every temperature shown.
        template: Terminal layout.
        now: Timestamp for the "Last updated" line. Defaults to the current UTC time.

    Raises:
        PreconditionError: if the record has no weather conditions.
    """
    _ = record.primary_condition
    builder = _TEXT_BUILDERS[DisplayTemplate(template)]
    return builder(record, unit, now if now is not None else utc_now())


def render_html(
    record: WeatherRecord,
    unit: TemperatureUnit = TemperatureUnit.CELSIUS,
    *,
    now: datetime | None = None,
) -> str:
    """Render a record as a standalone HTML document."""
    _ = record.primary_condition
    return build_weather_page_html(record, unit, now if now is not None else utc_now())
