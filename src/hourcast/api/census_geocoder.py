"""
US Census Bureau one-line address geocoder client.
"""

from typing import Any

from hourcast.api.base_api import BaseAPI
from hourcast.exceptions import APIValidationError
from hourcast.exceptions import GeocodingError
from hourcast.models.weather import Coordinates


class CensusGeocoderAPI(BaseAPI):
    """Resolve free-text US addresses to coordinates."""

    ENDPOINT = "geocoder/locations/onelineaddress"

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        benchmark: str = "Public_AR_Current",
        timeout: tuple[float, float] | None = None
    ):
        super().__init__(base_url, user_agent, timeout)
        self.benchmark = benchmark

    def get_coordinates(self, address: str) -> Coordinates:
        """Geocode an address, using the first match.

        Args:
            address: One-line address, e.g. ``1600 Pennsylvania Ave NW, Washington, DC``

        Returns:
            Coordinates of the best match

        Raises:
            GeocodingError: If the geocoder found no match
            APIError: If the request or response decoding fails
        """
        data = self.get(
            self.ENDPOINT,
            params={
                "format": "json",
                "benchmark": self.benchmark,
                "address": address,
            }
        )

        matches = (data.get("result") or {}).get("addressMatches") or []
        if not matches:
            raise GeocodingError("no matching coordinates for address", address)

        coordinates = self._extract_coordinates(matches[0])
        self.info(
            "Geocoded address",
            address=address,
            matched=matches[0].get("matchedAddress", ""),
            latitude=coordinates.latitude,
            longitude=coordinates.longitude
        )
        return coordinates

    @staticmethod
    def _extract_coordinates(match: dict[str, Any]) -> Coordinates:
        try:
            point = match["coordinates"]
            # The geocoder reports x as longitude and y as latitude
            return Coordinates(latitude=float(point["y"]), longitude=float(point["x"]))
        except (KeyError, TypeError, ValueError) as e:
            raise APIValidationError(
                f"could not parse geocoder match: {e!s}",
                details={"match": match}
            ) from e
