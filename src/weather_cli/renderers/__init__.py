"""Pure rendering functions: WeatherRecord -> display strings.

All renderers follow the same pattern:
  - Input: ``WeatherRecord``, ``TemperatureUnit`` and the render time ``now``
  - Output: str (rich console markup for the terminal, a full HTML document for the web)
  - No side effects, no I/O, no logging

Every template draws its values from the shared helpers below, never from
inline arithmetic, so layouts cannot drift apart.

Public API:
  - units: to_display_temperature, convert_kelvin, kelvin_to_celsius, kelvin_to_fahrenheit
  - weather_utils: format_wind_direction, format_cloudiness, format_visibility,
    temperature_feeling, temperature_color, gauge_cells, weather_symbol, ...
  - date_utils: format_sun_time, format_utc_offset, format_coordinates, format_updated
  - terminal: build_default_text, build_compact_text, build_detailed_text, build_minimal_text
  - page: build_weather_page_html

Adding a terminal template
--------------------------
1. Add a member to ``schemas.DisplayTemplate``.
2. Write ``build_{name}_text(record, unit, now) -> str`` in ``renderers/terminal.py``
   using the shared helpers; escape API strings with ``rich.markup.escape``.
3. Register it in ``presentation._TEXT_BUILDERS``.
4. Add tests: render a sample record and assert on the plain text
   (``rich.text.Text.from_markup(out).plain``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment; autoescape covers every interpolated API string
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
    keep_trailing_newline=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
