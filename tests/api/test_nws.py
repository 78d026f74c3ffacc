"""Tests for the forecast grid client."""

import pytest
import requests_mock

from hourcast.api.nws import NWSGridAPI
from hourcast.exceptions import APIResponseError, APIValidationError
from hourcast.models.weather import Coordinates

GRID_URL = "https://weather.test/gridpoints/LWX/97,71"

@pytest.fixture
def grid_api():
    return NWSGridAPI("https://weather.test", "hourcast-tests")

def test_get_forecast_grid_data_url_rounds_coordinates(grid_api):
    with requests_mock.Mocker() as m:
        m.get(
            "https://weather.test/points/38.8987,-77.0352",
            json={"properties": {"forecastGridData": GRID_URL}}
        )
        url = grid_api.get_forecast_grid_data_url(
            Coordinates(latitude=38.89869893252, longitude=-77.03518753691)
        )

    assert url == GRID_URL

def test_get_forecast_grid_data_url_missing_link(grid_api):
    with requests_mock.Mocker() as m:
        m.get("https://weather.test/points/1.0000,2.0000", json={"properties": {}})
        with pytest.raises(APIValidationError):
            grid_api.get_forecast_grid_data_url(Coordinates(latitude=1.0, longitude=2.0))

def test_get_forecast_grid_data_url_outside_coverage(grid_api):
    with requests_mock.Mocker() as m:
        m.get(
            "https://weather.test/points/51.5000,-0.1200",
            status_code=404,
            json={"title": "Data Unavailable For Requested Point"}
        )
        with pytest.raises(APIResponseError) as exc_info:
            grid_api.get_forecast_grid_data_url(Coordinates(latitude=51.5, longitude=-0.12))

    assert "Data Unavailable For Requested Point" in str(exc_info.value)

def test_get_grid_properties(grid_api):
    properties = {
        "temperature": {
            "uom": "wmoUnit:degC",
            "values": [{"validTime": "2024-06-01T10:00:00+00:00/PT1H", "value": 21.1}]
        }
    }
    with requests_mock.Mocker() as m:
        m.get(GRID_URL, json={"properties": properties})
        assert grid_api.get_grid_properties(GRID_URL) == properties

def test_get_grid_properties_missing(grid_api):
    with requests_mock.Mocker() as m:
        m.get(GRID_URL, json={"type": "Feature"})
        with pytest.raises(APIValidationError):
            grid_api.get_grid_properties(GRID_URL)
