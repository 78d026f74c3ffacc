"""Tests for the base API implementation."""

import logging
from unittest.mock import MagicMock, Mock, patch

import pytest
import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from hourcast.api.base_api import BaseAPI
from hourcast.exceptions import APITimeoutError, APIResponseError, APIValidationError
from hourcast.error_codes import ErrorCode

@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session

@pytest.fixture
def base_api(mock_session):
    """Create a BaseAPI instance for testing."""
    with patch('requests.Session', return_value=mock_session):
        return BaseAPI(base_url="https://api.test.com", user_agent="hourcast-tests")

def test_base_api_initialization():
    """Test BaseAPI initialization."""
    api = BaseAPI(base_url="https://api.test.com/", user_agent="hourcast-tests")
    assert api.base_url == "https://api.test.com/"
    assert api.timeout == BaseAPI.DEFAULT_TIMEOUT
    assert api.session.headers["User-Agent"] == "hourcast-tests"
    assert "geo+json" in api.session.headers["Accept"]

def test_base_url_gets_trailing_slash():
    """Test that relative endpoints resolve under the base path."""
    api = BaseAPI(base_url="https://api.test.com/v1", user_agent="ua", timeout=(1.0, 2.0))
    assert api.base_url == "https://api.test.com/v1/"
    assert api.timeout == (1.0, 2.0)

@pytest.mark.parametrize("status_code,body,expected_error", [
    (404, {"title": "Not Found"}, "Request failed: HTTP 404: Not Found (Code: invalid_response)"),
    (500, {"detail": "Unexpected Problem", "title": "Error"}, "Request failed: HTTP 500: Unexpected Problem (Code: invalid_response)"),
    (503, None, "Request failed: HTTP 503 (Code: invalid_response)")
])
def test_validate_response_errors(base_api, status_code, body, expected_error):
    """Test response validation with different error scenarios."""
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError()
    if body is None:
        mock_response.json.side_effect = ValueError("no json")
    else:
        mock_response.json.return_value = body

    with pytest.raises(APIResponseError) as exc_info:
        base_api._validate_response(mock_response)
    assert str(exc_info.value) == expected_error
    assert exc_info.value.response is mock_response

def test_parse_response_invalid_json(base_api):
    """Test parsing a body that is not JSON."""
    mock_response = Mock()
    mock_response.text = "<html>oops</html>"
    mock_response.url = "https://api.test.com/x"
    mock_response.json.side_effect = ValueError("Invalid JSON")

    with pytest.raises(APIValidationError) as exc_info:
        base_api._parse_response(mock_response)
    assert "could not parse HTTP response body" in str(exc_info.value)
    assert exc_info.value.code == ErrorCode.VALIDATION_FAILED

def test_parse_response_requires_object(base_api):
    """Test that a JSON array is rejected."""
    mock_response = Mock()
    mock_response.json.return_value = [1, 2]

    with pytest.raises(APIValidationError):
        base_api._parse_response(mock_response)

@pytest.mark.parametrize("exception_class,expected_error", [
    (Timeout, APITimeoutError),
    (ConnectionError, APIResponseError),
    (RequestException, APIResponseError)
])
def test_make_request_error_handling(base_api, exception_class, expected_error):
    """Test error handling in make_request method."""
    base_api.session.request.side_effect = exception_class("Test error")
    with pytest.raises(expected_error):
        base_api._make_request("GET", "test")
    # Failed requests are not retried
    assert base_api.session.request.call_count == 1

def test_make_request_success(base_api):
    """Test successful request."""
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.json.return_value = {"success": True}
    base_api.session.request.return_value = mock_response

    result = base_api._make_request("GET", "points/1,2", params={"key": "value"})

    assert result == {"success": True}
    kwargs = base_api.session.request.call_args[1]
    assert kwargs.get("method") == "GET"
    assert kwargs.get("url") == "https://api.test.com/points/1,2"
    assert kwargs.get("params") == {"key": "value"}
    assert kwargs.get("timeout") == BaseAPI.DEFAULT_TIMEOUT

def test_make_request_absolute_url(base_api):
    """Test that absolute endpoints are used as given."""
    mock_response = Mock()
    mock_response.json.return_value = {}
    base_api.session.request.return_value = mock_response

    base_api.get("https://other.test.com/grid")

    kwargs = base_api.session.request.call_args[1]
    assert kwargs.get("url") == "https://other.test.com/grid"

def test_make_request_logs_failure(base_api, caplog):
    base_api.session.request.side_effect = Timeout("slow")
    with caplog.at_level(logging.ERROR):
        with pytest.raises(APITimeoutError):
            base_api.get("points/1,2")

    assert "Request timed out | Context: url=https://api.test.com/points/1,2" in caplog.text
