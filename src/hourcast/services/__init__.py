"""Service implementations."""

from .alignment import AlignedRow, AlignmentEngine
from .forecast_formatter import ForecastFormatter
from .forecast_service import ForecastService, ForecastTable


__all__ = [
    'AlignedRow',
    'AlignmentEngine',
    'ForecastFormatter',
    'ForecastService',
    'ForecastTable',
]
