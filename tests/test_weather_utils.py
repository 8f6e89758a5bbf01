"""Tests for the shared weather formatting helpers."""

from __future__ import annotations

import pytest
from rich.text import Text

from weather_cli.renderers.weather_utils import (
    BAR_EMPTY,
    BAR_FILLED,
    FALLBACK_SYMBOL,
    ICON_SYMBOLS,
    format_cloudiness,
    format_gauge_bar,
    format_humidity,
    format_pressure,
    format_progress_bar,
    format_temperature_feeling,
    format_visibility,
    format_wind_direction,
    format_wind_speed,
    gauge_cells,
    gauge_percent,
    progress_cells,
    temperature_color,
    temperature_css_color,
    temperature_feeling,
    weather_symbol,
)


def plain(markup: str) -> str:
    return Text.from_markup(markup).plain


class TestWeatherSymbol:
    """Icon code lookup."""

    def test_clear_day_and_night_differ(self) -> None:
        assert weather_symbol("01d") != weather_symbol("01n")

    def test_day_night_share_symbol_for_rain(self) -> None:
        assert weather_symbol("10d") == weather_symbol("10n")

    def test_unknown_code_falls_back(self) -> None:
        assert weather_symbol("99x") == FALLBACK_SYMBOL
        assert weather_symbol("") == FALLBACK_SYMBOL

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ICON_SYMBOLS["01d"] = "x"  # type: ignore[index]


class TestWindDirection:
    """16-point compass with wrap-around."""

    @pytest.mark.parametrize(
        ("degrees", "expected"),
        [
            (0, "N"),
            (11.24, "N"),
            (11.25, "NNE"),
            (45, "NE"),
            (90, "E"),
            (180, "S"),
            (270, "W"),
            (348.75, "N"),
            (349, "N"),
            (359, "N"),
        ],
    )
    def test_points(self, degrees: float, expected: str) -> None:
        assert format_wind_direction(degrees) == expected

    def test_wraps_past_360(self) -> None:
        assert format_wind_direction(360) == "N"
        assert format_wind_direction(450) == "E"

    def test_negative_bearing_wraps(self) -> None:
        assert format_wind_direction(-90) == "W"

    def test_wind_speed(self) -> None:
        assert format_wind_speed(5) == "5.0 m/s"


class TestCloudiness:
    """Cloud cover buckets."""

    @pytest.mark.parametrize(
        ("pct", "expected"),
        [
            (0, "Clear sky"),
            (1, "Mostly clear"),
            (25, "Mostly clear"),
            (26, "Partly cloudy"),
            (50, "Partly cloudy"),
            (51, "Mostly cloudy"),
            (75, "Mostly cloudy"),
            (76, "Overcast"),
            (100, "Overcast"),
        ],
    )
    def test_buckets(self, pct: int, expected: str) -> None:
        assert format_cloudiness(pct) == expected

    def test_out_of_range_is_unknown(self) -> None:
        assert format_cloudiness(101) == "Unknown"
        assert format_cloudiness(-1) == "Unknown"


class TestSimpleFormatters:
    """Visibility, humidity, pressure."""

    def test_visibility_km(self) -> None:
        assert format_visibility(10000) == "10.0 km"
        assert format_visibility(1000) == "1.0 km"

    def test_visibility_metres_below_one_km(self) -> None:
        assert format_visibility(999) == "999 m"
        assert format_visibility(0) == "0 m"

    def test_visibility_missing(self) -> None:
        assert format_visibility(None) == "N/A"

    def test_humidity_and_pressure(self) -> None:
        assert format_humidity(65) == "65%"
        assert format_pressure(1013) == "1013 hPa"


class TestTemperatureFeeling:
    """Subjective labels; thresholds belong to the higher bucket."""

    @pytest.mark.parametrize(
        ("celsius", "label"),
        [
            (-15, "Freezing"),
            (-10, "Very Cold"),
            (-0.1, "Very Cold"),
            (0, "Cold"),
            (10, "Cool"),
            (19.9, "Cool"),
            (20, "Warm"),
            (30, "Hot"),
            (40, "Extremely Hot"),
            (55, "Extremely Hot"),
        ],
    )
    def test_labels(self, celsius: float, label: str) -> None:
        assert temperature_feeling(celsius).label == label

    def test_unstyled_has_no_markup(self) -> None:
        text = format_temperature_feeling(20)
        assert text.endswith(" Warm")
        assert "[" not in text

    def test_styled_renders_to_same_plain_text(self) -> None:
        assert plain(format_temperature_feeling(20, styled=True)) == format_temperature_feeling(20)

    def test_colors_agree_across_targets(self) -> None:
        assert temperature_color(25) == "yellow"
        assert temperature_css_color(25) == "#f39c12"
        assert temperature_color(-5) == "bright_blue"
        assert temperature_css_color(45) == "#e74c3c"


class TestGauge:
    """Temperature gauge over -20..40 °C."""

    @pytest.mark.parametrize("celsius", [-60, -20, -3.3, 0, 10, 20, 33.3, 40, 99])
    def test_cells_sum_to_width(self, celsius: float) -> None:
        filled, empty = gauge_cells(celsius)
        assert filled + empty == 20
        assert filled >= 0
        assert empty >= 0

    def test_clamped_at_ends(self) -> None:
        assert gauge_cells(-50) == (0, 20)
        assert gauge_cells(-20) == (0, 20)
        assert gauge_cells(40) == (20, 0)
        assert gauge_cells(100) == (20, 0)

    def test_fill_rounds_down(self) -> None:
        assert gauge_cells(10) == (10, 10)
        assert gauge_cells(20) == (13, 7)

    def test_custom_width(self) -> None:
        assert gauge_cells(10, width=10) == (5, 5)

    def test_percent(self) -> None:
        assert gauge_percent(-20) == 0.0
        assert gauge_percent(10) == 50.0
        assert gauge_percent(20) == 66.7
        assert gauge_percent(80) == 100.0

    def test_bar_text(self) -> None:
        bar = plain(format_gauge_bar(10, width=10, color="blue"))
        assert bar == "[" + BAR_FILLED * 5 + BAR_EMPTY * 5 + "]"

    def test_empty_bar(self) -> None:
        assert plain(format_gauge_bar(-30, width=4)) == "[" + BAR_EMPTY * 4 + "]"


class TestProgressBar:
    """Percent bar used for cloud cover."""

    def test_cells(self) -> None:
        assert progress_cells(60, 100, 10) == (6, 4)
        assert progress_cells(0, 100, 20) == (0, 20)
        assert progress_cells(100, 100, 20) == (20, 0)

    def test_clamped(self) -> None:
        assert progress_cells(150, 100, 10) == (10, 0)
        assert progress_cells(-5, 100, 10) == (0, 10)

    def test_zero_maximum(self) -> None:
        assert progress_cells(5, 0, 10) == (0, 10)

    def test_bar_text(self) -> None:
        bar = plain(format_progress_bar(60, width=10))
        assert bar == "[" + BAR_FILLED * 6 + BAR_EMPTY * 4 + "] 60%"
