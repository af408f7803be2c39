"""Unit conversion and display rounding.

All display rounding is round-half-away-from-zero: 2.5 -> 3, -2.5 -> -3.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from .schemas import TemperatureUnit

KPH_TO_MPH = 0.621371


def round_display(value: float) -> int:
    # Decimal ROUND_HALF_UP rounds ties away from zero; float math would turn 0.49999999999999994 into 1.
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def c_to_f(celsius: float) -> int:
    return round_display(celsius * 9 / 5 + 32)


def kph_to_mph(kph: float) -> int:
    return round_display(kph * KPH_TO_MPH)


def display_temperature(celsius: float, unit: TemperatureUnit) -> int:
    if unit is TemperatureUnit.FAHRENHEIT:
        return c_to_f(celsius)
    return round_display(celsius)


def display_speed(kph: float, unit: TemperatureUnit) -> tuple[int, str]:
    """Wind speed follows the temperature toggle: metric with Celsius, mph with Fahrenheit."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return kph_to_mph(kph), "mph"
    return round_display(kph), "km/h"
