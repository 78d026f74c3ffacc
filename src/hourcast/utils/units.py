"""Unit labels and imperial conversion for forecast grid values."""

from collections.abc import Callable
from dataclasses import replace

from hourcast.models.weather import WeatherPoint


NO_DATA = "No Data"

UNIT_LABELS = {
    'wmoUnit:degC': 'C',
    'wmoUnit:km_h-1': 'kph',
    'wmoUnit:percent': '%',
    'wmoUnit:mm': 'mm',
    'wmoUnit:m': 'm',
    'wmoUnit:degree_(angle)': 'deg',
}

# unit token -> (converter, imperial label)
FREEDOM_CONVERSIONS: dict[str, tuple[Callable[[float], float], str]] = {
    'wmoUnit:degC': (lambda v: v * 9.0 / 5.0 + 32, 'F'),
    'wmoUnit:km_h-1': (lambda v: v * 0.621371, 'mph'),
    'wmoUnit:mm': (lambda v: v * 0.0393701, 'in'),
    'wmoUnit:m': (lambda v: v * 3.28084, 'ft'),
}


def display_unit(unit: str) -> str:
    """Short label for a unit token, or the token itself when unknown."""
    return UNIT_LABELS.get(unit, unit)


def liberate(point: WeatherPoint) -> WeatherPoint:
    """Convert a point to imperial units where a conversion is known."""
    conversion = FREEDOM_CONVERSIONS.get(point.unit)
    if conversion is None:
        return point
    convert, label = conversion
    return replace(point, value=convert(point.value), unit=label)


def format_weather_value(point: WeatherPoint | None, freedom: bool = False) -> str:
    """Render one table cell as ``value unit`` or the no-data sentinel."""
    if point is None:
        return NO_DATA
    if freedom:
        point = liberate(point)
    return f"{point.value:5.5g} {display_unit(point.unit)}"
