"""Centralized error definitions for the hourcast application."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import requests

from hourcast.error_codes import ErrorCode


logger = logging.getLogger(__name__)

@dataclass
class HourcastError(Exception):
    """Base exception for all hourcast errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class APIError(HourcastError):
    """Base class for API-related errors."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.REQUEST_FAILED,
        response: requests.Response | None = None,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)
        self.response = response

class APITimeoutError(APIError):
    """API timeout error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.TIMEOUT, details=details)

class APIResponseError(APIError):
    """API response error."""
    def __init__(self, message: str, response: requests.Response | None = None):
        super().__init__(message, ErrorCode.INVALID_RESPONSE, response=response)

class APIValidationError(APIError):
    """API validation error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details=details)

class ConfigError(HourcastError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)

class ValidationError(HourcastError):
    """Validation error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, details)

class GeocodingError(HourcastError):
    """Address could not be resolved to coordinates."""
    def __init__(self, message: str, address: str):
        super().__init__(message, ErrorCode.LOCATION_NOT_FOUND, {"address": address})

class PropertyUnavailable(HourcastError):
    """Requested weather property is missing from the forecast grid."""
    def __init__(self, message: str, property_name: str):
        super().__init__(message, ErrorCode.MISSING_DATA, {"property": property_name})

class TimeRangeError(HourcastError):
    """Base class for errors decoding forecast validity times.

    The offending raw text is always available as ``details['value']``.
    """
    def __init__(self, message: str, code: ErrorCode, value: str, details: dict[str, Any] | None = None):
        details = details or {}
        details["value"] = value
        super().__init__(message, code, details)

    @property
    def value(self) -> str:
        return self.details["value"]

class InvalidDuration(TimeRangeError):
    """ISO-8601 duration text is malformed or out of range."""
    def __init__(self, message: str, value: str, field: str | None = None):
        details = {"field": field} if field else None
        super().__init__(message, ErrorCode.INVALID_DURATION, value, details)

    @property
    def field(self) -> str | None:
        return self.details.get("field")

class InvalidInstant(TimeRangeError):
    """Timestamp is not a valid RFC3339 instant."""
    def __init__(self, message: str, value: str):
        super().__init__(message, ErrorCode.INVALID_INSTANT, value)

class MalformedTimeRange(TimeRangeError):
    """Validity time is not a single ``instant/duration`` pair."""
    def __init__(self, message: str, value: str):
        super().__init__(message, ErrorCode.MALFORMED_TIME_RANGE, value)

class InvertedRange(HourcastError):
    """Requested display window ends before it starts."""
    def __init__(self, start: datetime, end: datetime):
        super().__init__(
            f"display start time {start.isoformat()} is after end time {end.isoformat()}",
            ErrorCode.INVERTED_RANGE,
            {"start": start.isoformat(), "end": end.isoformat()}
        )

@contextmanager
def handle_errors(
    error_type: type[HourcastError],
    service: str,
    operation: str
) -> Iterator[None]:
    """Log errors raised inside the block and re-raise them.

    Args:
        error_type: The expected error type
        service: The service name
        operation: The operation name
    """
    try:
        yield
    except error_type as e:
        logger.error(f"{service}.{operation} failed: {e}")
        raise
    except Exception as e:
        # Log unexpected error with traceback
        logger.error(
            f"Unexpected error in {service}.{operation}: {e}",
            exc_info=True
        )
        raise
