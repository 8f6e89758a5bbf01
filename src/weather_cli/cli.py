"""
Command-line interface for the application.

This module provides the ``weather`` entry point: fetch the current weather
for one location and show it in the terminal or in the browser.
"""

from __future__ import annotations

import argparse
import http.server
import logging
import sys
import webbrowser

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from weather_cli import __version__
from weather_cli.config import Settings, get_settings
from weather_cli.datasources.openweather import (
    fetch_current_weather,
    fetch_current_weather_by_coords,
)
from weather_cli.exceptions import ServerError, UnknownUnitError, WeatherCliError
from weather_cli.presentation import render, render_html
from weather_cli.schemas import DisplayTemplate, TemperatureUnit, WeatherRecord
from weather_cli.server import make_page_handler

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

HOURGLASS = "\u23f3"
GLOBE = "\U0001f310"
LINK = "\U0001f517"
CROSS = "\u274c"
BULB = "\U0001f4a1"
MAGNIFIER = "\U0001f50d"


def _unit_arg(value: str) -> TemperatureUnit:
    try:
        return TemperatureUnit.parse(value)
    except UnknownUnitError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather",
        description="Current weather from OpenWeatherMap, in the terminal or the browser",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help="City name, e.g. 'London' or 'Paris,FR'",
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude (use with --lon)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (use with --lat)")
    parser.add_argument(
        "-u",
        "--unit",
        type=_unit_arg,
        default=None,
        help="Temperature unit: c/celsius, f/fahrenheit, k/kelvin (default: from settings)",
    )
    parser.add_argument(
        "-t",
        "--template",
        choices=[t.value for t in DisplayTemplate],
        default=None,
        help="Terminal layout (default: from settings)",
    )
    parser.add_argument(
        "-w",
        "--web",
        action="store_true",
        help="Show the weather in the browser instead of the terminal",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for --web (default: web_port from settings)",
    )
    return parser


def configure_logging(debug: bool) -> None:
    """Route log records through rich. WARNING by default, DEBUG with --debug."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def describe_location(args: argparse.Namespace) -> str:
    if args.city:
        return str(args.city)
    return f"{args.lat}, {args.lon}"


def fetch_weather(args: argparse.Namespace, settings: Settings) -> WeatherRecord:
    """Fetch by coordinates when both are given, otherwise by city name."""
    if args.lat is not None and args.lon is not None:
        return fetch_current_weather_by_coords(
            args.lat,
            args.lon,
            settings.api_key,
            url=settings.api_url,
            timeout=settings.request_timeout,
        )
    return fetch_current_weather(
        args.city,
        settings.api_key,
        url=settings.api_url,
        timeout=settings.request_timeout,
    )


def cmd_show(args: argparse.Namespace) -> int:
    """Handle terminal mode: fetch, then print the chosen template."""
    settings = get_settings()
    unit = args.unit or settings.unit
    template = DisplayTemplate(args.template) if args.template else settings.template

    console.print(
        f"[yellow]{HOURGLASS}[/yellow] Fetching weather data for "
        f"'{escape(describe_location(args))}'...",
        highlight=False,
        emoji=False,
    )
    record = fetch_weather(args, settings)
    output = render(record, unit, template)

    if console.is_terminal:
        console.clear()
    console.print(output, highlight=False, emoji=False)
    return 0


def cmd_web(args: argparse.Namespace) -> int:
    """Handle --web: render the page once and serve it until Ctrl+C."""
    settings = get_settings()
    unit = args.unit or settings.unit
    port = args.port if args.port is not None else settings.web_port

    console.print(
        f"[yellow]{HOURGLASS}[/yellow] Fetching weather data for "
        f"'{escape(describe_location(args))}'...",
        highlight=False,
        emoji=False,
    )
    record = fetch_weather(args, settings)
    html = render_html(record, unit)

    try:
        server = http.server.HTTPServer((settings.web_host, port), make_page_handler(html))
    except (OSError, OverflowError) as exc:
        raise ServerError(
            f"Could not bind {settings.web_host}:{port}: {getattr(exc, 'strerror', None) or exc}"
        ) from exc

    with server:
        url = f"http://localhost:{server.server_address[1]}"
        console.print(f"{GLOBE} Starting web server on {url} (Ctrl+C to stop)", highlight=False)
        console.print(f"{LINK} Opening browser...\n", highlight=False)
        webbrowser.open(url)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            console.print("\nServer stopped.")

    return 0


def print_error(message: str) -> None:
    """Print an error with troubleshooting hints to stderr."""
    err_console.print(
        f"\n[bold red]{CROSS} ERROR:[/bold red] {escape(message)}", highlight=False, emoji=False
    )
    err_console.print()
    err_console.print(f"[yellow]{BULB}[/yellow] Check your internet connection and API key")
    err_console.print(f"[yellow]{MAGNIFIER}[/yellow] Make sure the city name is correct")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.city and (args.lat is None or args.lon is None):
        parser.error("a city name or both --lat and --lon are required")

    handler = cmd_web if args.web else cmd_show
    try:
        configure_logging(args.debug or get_settings().debug)
        return handler(args)
    except WeatherCliError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
