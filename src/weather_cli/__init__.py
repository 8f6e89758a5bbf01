"""Weather CLI - current weather from OpenWeatherMap in the terminal or the browser.

Architecture::

    datasources/     External APIs (OpenWeatherMap current weather)
    services/        Shared utilities (HTTP session with timeout, no retries)
    schemas.py       WeatherRecord, TemperatureUnit, DisplayTemplate
    renderers/       Pure record -> text (rich markup) and record -> HTML
    presentation.py  Template dispatch: render(), render_html()
    server.py        One-page HTTP handler for --web
    cli.py           argparse entry point (``weather``)

Data flow: datasources -> WeatherRecord -> renderers -> presentation -> console or HTTP

Extension points (see each package's docstring for a step-by-step guide):
  - New data source:        datasources/__init__.py
  - New terminal template:  renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_cli.config import Settings
from weather_cli.presentation import render, render_html
from weather_cli.schemas import DisplayTemplate, TemperatureUnit, WeatherRecord

__all__ = [
    "DisplayTemplate",
    "Settings",
    "TemperatureUnit",
    "WeatherRecord",
    "__version__",
    "render",
    "render_html",
]
