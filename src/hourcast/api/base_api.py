"""
Base API client for the hourcast application.
"""

import time
from typing import Any
from urllib.parse import urljoin

import requests

from hourcast.exceptions import APIResponseError
from hourcast.exceptions import APITimeoutError
from hourcast.exceptions import APIValidationError
from hourcast.utils.logging_utils import LoggerMixin


class BaseAPI(LoggerMixin):
    """Base class for API clients.

    Requests are made once; a failed request is reported to the caller
    without being retried.
    """

    # Default timeouts (connection timeout, read timeout)
    DEFAULT_TIMEOUT = (7.0, 20.0)

    DEFAULT_HEADERS = {
        'Accept': 'application/geo+json, application/json'
    }

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        timeout: tuple[float, float] | None = None
    ):
        """Initialize API client.

        Args:
            base_url: Base URL for API
            user_agent: User-Agent header value, required by api.weather.gov
            timeout: Optional (connection, read) timeout in seconds
        """
        super().__init__()

        self.base_url = base_url.rstrip("/") + "/"
        self.user_agent = user_agent
        self.timeout = timeout or self.DEFAULT_TIMEOUT
        self.session = self._create_session()

        self.logger.debug(f"{type(self).__name__}: base_url={self.base_url} timeout={self.timeout}")

    def _create_session(self) -> requests.Session:
        """
        Create a requests session with the default headers.

        Returns:
            Configured session
        """
        session = requests.Session()
        session.headers.update(self.DEFAULT_HEADERS)
        session.headers['User-Agent'] = self.user_agent
        return session

    def _validate_response(self, response: requests.Response) -> None:
        """
        Validate response and raise appropriate errors.

        Args:
            response: Response to validate

        Raises:
            APIResponseError: If response status code indicates an error
        """
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            error_msg = f"HTTP {response.status_code}"
            try:
                error_data = response.json()
                if isinstance(error_data, dict):
                    detail = error_data.get('detail', error_data.get('title'))
                    if detail:
                        error_msg = f"{error_msg}: {detail}"
            except (ValueError, AttributeError):
                pass

            raise APIResponseError(f"Request failed: {error_msg}", response=response) from e

    def _parse_response(self, response: requests.Response) -> dict[str, Any]:
        """Parse response content.

        Args:
            response: Response object to parse

        Returns:
            Decoded JSON object

        Raises:
            APIValidationError: If response is not a JSON object
        """
        try:
            result = response.json()
        except ValueError as e:
            content = response.text.strip()
            raise APIValidationError(
                f"could not parse HTTP response body: {content[:100]}",
                details={"url": response.url}
            ) from e

        if not isinstance(result, dict):
            raise APIValidationError(
                "could not parse HTTP response body: expected a JSON object",
                details={"url": response.url}
            )
        return result

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint, relative to the base URL or absolute
            params: Query parameters

        Returns:
            Response data

        Raises:
            APITimeoutError: If request times out
            APIResponseError: If request fails
            APIValidationError: If response validation fails
        """
        start_time = time.time()
        url = urljoin(self.base_url, endpoint)

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout
            )
            self._validate_response(response)
            result = self._parse_response(response)
            self.logger.debug(f"{method} {url} completed in {time.time() - start_time:.2f}s")
            return result

        except requests.exceptions.Timeout as e:
            elapsed = time.time() - start_time
            self.error("Request timed out", url=url, elapsed=f"{elapsed:.2f}s", error=e)
            raise APITimeoutError(
                f"Request timed out after {elapsed:.2f} seconds: {e!s}",
                details={"url": url}
            ) from e

        except requests.exceptions.RequestException as e:
            elapsed = time.time() - start_time
            self.error("Request failed", url=url, elapsed=f"{elapsed:.2f}s", error=e)
            raise APIResponseError(f"could not execute HTTP request: {e!s}") from e

    def get(self, endpoint: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Make a GET request."""
        return self._make_request("GET", endpoint, params=params)
