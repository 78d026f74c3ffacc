"""
Forecast service: geocode, fetch the forecast grid and align it hourly.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from hourcast.api.census_geocoder import CensusGeocoderAPI
from hourcast.api.nws import NWSGridAPI
from hourcast.config.types import AppConfig
from hourcast.exceptions import HourcastError
from hourcast.exceptions import PropertyUnavailable
from hourcast.exceptions import TimeRangeError
from hourcast.exceptions import handle_errors
from hourcast.models.forecast_request import ForecastRequest
from hourcast.models.weather import Coordinates
from hourcast.models.weather import PropertySeries
from hourcast.models.weather import WeatherPoint
from hourcast.services.alignment import AlignedRow
from hourcast.services.alignment import AlignmentEngine
from hourcast.utils.logging_utils import LoggerMixin
from hourcast.utils.logging_utils import log_execution
from hourcast.utils.time_range import parse_time_range


@dataclass(frozen=True)
class ForecastTable:
    """Aligned forecast ready for rendering."""
    coordinates: Coordinates
    grid_data_url: str
    properties: tuple[str, ...]
    rows: list[AlignedRow]


def build_property_series(name: str, block: dict[str, Any]) -> PropertySeries:
    """Turn one raw grid property block into a sorted series.

    Every validTime is decoded, then points with a null value are dropped
    since they carry no forecast.

    Args:
        name: Property name, e.g. ``temperature``
        block: ``{"uom": ..., "values": [{"validTime": ..., "value": ...}]}``

    Raises:
        PropertyUnavailable: If the block or one of its entries is malformed
        TimeRangeError: If any validTime cannot be decoded; the whole
            property fails
    """
    if not isinstance(block, dict) or not isinstance(block.get("values"), list):
        raise PropertyUnavailable(f"error parsing requested property '{name}'", name)

    unit = str(block.get("uom", ""))
    points: list[WeatherPoint] = []
    for entry in block["values"]:
        if not isinstance(entry, dict):
            raise PropertyUnavailable(f"error parsing requested property '{name}'", name)
        try:
            interval = parse_time_range(str(entry.get("validTime", "")))
        except TimeRangeError as e:
            e.details["property"] = name
            raise

        value = entry.get("value")
        if value is None:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise PropertyUnavailable(f"error parsing requested property '{name}'", name) from e
        points.append(WeatherPoint(interval=interval, value=value, unit=unit))

    return PropertySeries.from_points(name, unit, points)


class ForecastService(LoggerMixin):
    """Runs the geocode, grid lookup and data fetch steps in order."""

    def __init__(
        self,
        config: AppConfig,
        geocoder: CensusGeocoderAPI | None = None,
        grid_api: NWSGridAPI | None = None
    ):
        super().__init__()
        self.config = config
        self.geocoder = geocoder or CensusGeocoderAPI(
            config.geocoder['url'],
            config.user_agent,
            benchmark=config.geocoder['benchmark'],
            timeout=config.timeout
        )
        self.grid_api = grid_api or NWSGridAPI(
            config.weather['url'],
            config.user_agent,
            timeout=config.timeout
        )

    def get_series(self, grid_data_url: str, properties: Sequence[str]) -> dict[str, PropertySeries]:
        """Fetch the grid once and build a series per requested property.

        Raises:
            PropertyUnavailable: If a requested property is missing
        """
        grid = self.grid_api.get_grid_properties(grid_data_url)

        series: dict[str, PropertySeries] = {}
        for name in properties:
            block = grid.get(name)
            if block is None:
                raise PropertyUnavailable(f"no data for requested property: {name}", name)
            series[name] = build_property_series(name, block)
            if not series[name]:
                self.warning("Forecast grid has no values for property", property=name)
            self.debug("Built property series", property=name, points=len(series[name]))
        return series

    @log_execution(level='DEBUG')
    def get_forecast(self, request: ForecastRequest) -> ForecastTable:
        """Produce the hourly forecast table for a request.

        Raises:
            HourcastError: If any step fails; nothing is retried
        """
        self.set_log_context(address=request.address)
        try:
            with handle_errors(HourcastError, "forecast", "get_forecast"):
                coordinates = self.geocoder.get_coordinates(request.address)
                grid_data_url = self.grid_api.get_forecast_grid_data_url(coordinates)
                series = self.get_series(grid_data_url, request.properties)

                engine = AlignmentEngine(series, request.properties)
                rows = engine.align(request.start, request.end)
        finally:
            self.clear_log_context()

        return ForecastTable(
            coordinates=coordinates,
            grid_data_url=grid_data_url,
            properties=request.properties,
            rows=rows
        )
