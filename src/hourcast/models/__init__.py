"""
Models package for the hourcast application.
"""

from .forecast_request import ForecastRequest
from .weather import Coordinates, Interval, PropertySeries, WeatherPoint

__all__ = ['Coordinates', 'ForecastRequest', 'Interval', 'PropertySeries', 'WeatherPoint']
