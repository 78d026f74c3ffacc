"""
National Weather Service (api.weather.gov) forecast grid client.
"""

from typing import Any

from hourcast.api.base_api import BaseAPI
from hourcast.exceptions import APIValidationError
from hourcast.models.weather import Coordinates


class NWSGridAPI(BaseAPI):
    """Look up and download gridded forecast data for a point."""

    def get_forecast_grid_data_url(self, coordinates: Coordinates) -> str:
        """Find the raw forecast grid URL covering a point.

        The points endpoint redirects requests with more than four decimal
        places, so coordinates are rounded first.

        Raises:
            APIValidationError: If the response has no grid data link
            APIError: If the request fails
        """
        data = self.get(f"points/{coordinates.latitude:.4f},{coordinates.longitude:.4f}")

        url = (data.get("properties") or {}).get("forecastGridData")
        if not url or not isinstance(url, str):
            raise APIValidationError(
                "points response has no forecastGridData link",
                details={"latitude": coordinates.latitude, "longitude": coordinates.longitude}
            )

        self.info("Resolved forecast grid", url=url)
        return url

    def get_grid_properties(self, grid_data_url: str) -> dict[str, Any]:
        """Download a forecast grid and return its ``properties`` block.

        Each weather property in the block has the shape
        ``{"uom": "wmoUnit:degC", "values": [{"validTime": "...", "value": 1.0}]}``.

        Raises:
            APIValidationError: If the response has no properties mapping
            APIError: If the request fails
        """
        data = self.get(grid_data_url)

        properties = data.get("properties")
        if not isinstance(properties, dict):
            raise APIValidationError(
                "forecast grid response has no properties",
                details={"url": grid_data_url}
            )
        return properties
