"""Error codes for the hourcast application."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # API Errors
    REQUEST_FAILED = "request_failed"
    TIMEOUT = "timeout"

    # Data Errors
    INVALID_RESPONSE = "invalid_response"
    MISSING_DATA = "missing_data"
    VALIDATION_FAILED = "validation_failed"

    # Configuration Errors
    CONFIG_INVALID = "config_invalid"

    # Location Errors
    LOCATION_NOT_FOUND = "location_not_found"

    # Forecast time errors
    INVALID_DURATION = "invalid_duration"
    INVALID_INSTANT = "invalid_instant"
    MALFORMED_TIME_RANGE = "malformed_time_range"
    INVERTED_RANGE = "inverted_range"
