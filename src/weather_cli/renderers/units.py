"""Temperature unit conversion.

Records store Kelvin; every conversion happens here, at render time.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from weather_cli.schemas import KELVIN_OFFSET, TemperatureUnit

_ONE_DECIMAL = Decimal("0.1")


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius."""
    return kelvin - KELVIN_OFFSET


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert Kelvin to Fahrenheit."""
    return (kelvin - KELVIN_OFFSET) * 9 / 5 + 32


def convert_kelvin(kelvin: float, unit: TemperatureUnit) -> float:
    """Convert a Kelvin reading to ``unit``."""
    if unit is TemperatureUnit.CELSIUS:
        return kelvin_to_celsius(kelvin)
    if unit is TemperatureUnit.FAHRENHEIT:
        return kelvin_to_fahrenheit(kelvin)
    return kelvin


def round_half_away(value: float) -> Decimal:
    """Round to one decimal place, halves away from zero.

    Works on the shortest repr of the float so ``0.05`` rounds to ``0.1``
    rather than to the nearest binary neighbour.
    """
    with localcontext() as ctx:
        # enough digits for the largest finite float
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    # Decimal keeps the sign of -0.0
    return rounded.copy_abs() if rounded.is_zero() else rounded


def format_degrees(value: float, unit: TemperatureUnit) -> str:
    """Format an already-converted value with the unit suffix, e.g. ``20.0°C``."""
    return f"{round_half_away(value)}{unit.symbol}"


def to_display_temperature(kelvin: float, unit: TemperatureUnit) -> str:
    """Convert a Kelvin reading and format it, e.g. ``68.0°F``."""
    return format_degrees(convert_kelvin(kelvin, unit), unit)
