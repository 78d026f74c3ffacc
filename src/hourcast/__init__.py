"""
Hour-by-hour weather forecast tables for US addresses.
"""

__version__ = '0.1.0'

from .exceptions import (
    APIError,
    APIResponseError,
    APITimeoutError,
    APIValidationError,
    ConfigError,
    GeocodingError,
    HourcastError,
    InvalidDuration,
    InvalidInstant,
    InvertedRange,
    MalformedTimeRange,
    PropertyUnavailable,
    TimeRangeError,
    ValidationError,
)

__all__ = [
    'APIError',
    'APIResponseError',
    'APITimeoutError',
    'APIValidationError',
    'ConfigError',
    'GeocodingError',
    'HourcastError',
    'InvalidDuration',
    'InvalidInstant',
    'InvertedRange',
    'MalformedTimeRange',
    'PropertyUnavailable',
    'TimeRangeError',
    'ValidationError',
]
