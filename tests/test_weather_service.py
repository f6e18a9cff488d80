from unittest import mock

import pytest

from weathercep.http_client import HTTPResponse
from weathercep.weather_service import WeatherService, WeatherServiceError

QUERY_URL = (
    "https://api.weatherapi.com/v1/current.json"
    "?key={}&q=S%C3%A3o+Paulo%2C+SP%2C+Brazil&aqi=no"
)


def weather_body(temp_c):
    text = (
        '{"location": {"name": "São Paulo", "region": "Sao Paulo", "country": "Brazil"},'
        ' "current": {"temp_c": %.1f, "temp_f": 77.0}}' % temp_c
    )
    return text.encode("utf-8")


def mock_client(outcome):
    client = mock.Mock()
    if isinstance(outcome, BaseException):
        client.get.side_effect = outcome
    else:
        client.get.return_value = outcome
    return client


@pytest.mark.parametrize(
    ("temp_c", "expected_f", "expected_k"),
    [
        (25.0, 77.0, 298.0),
        (0.0, 32.0, 273.0),
        (-10.0, 14.0, 263.0),
        (40.0, 104.0, 313.0),
    ],
)
def test_temperatures(temp_c, expected_f, expected_k):
    client = mock_client(
        HTTPResponse(200, weather_body(temp_c), {"Content-Type": "application/json"})
    )

    result = WeatherService(client, api_key="placeholder").get_temperature_by_city(
        "São Paulo", "SP"
    )

    assert (result.temp_c, result.temp_f, result.temp_k) == (temp_c, expected_f, expected_k)
    client.get.assert_called_once_with(QUERY_URL.format("placeholder"))


@pytest.mark.parametrize(
    ("api_key", "outcome", "message", "calls"),
    [
        ("", AssertionError("must not be called"), "weather API key not configured", 0),
        (
            "token",
            HTTPResponse(401, b'{"error": {"code": 1002, "message": "API key not provided."}}'),
            "error fetching weather data: status 401",
            1,
        ),
        ("placeholder", HTTPResponse(200, b"{invalid json}"), "error decoding weather response", 1),
        ("placeholder", ConnectionError("connection error"), "error fetching weather data", 1),
    ],
)
def test_failures(api_key, outcome, message, calls):
    client = mock_client(outcome)
    service = WeatherService(client, api_key=api_key)

    with pytest.raises(WeatherServiceError) as excinfo:
        service.get_temperature_by_city("São Paulo", "SP")

    assert message in str(excinfo.value)
    assert client.get.call_args_list == [mock.call(QUERY_URL.format(api_key))] * calls


def test_from_env_reads_api_key(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "placeholder")
    client = mock_client(HTTPResponse(200, weather_body(25.0)))

    result = WeatherService.from_env(client).get_temperature_by_city("São Paulo", "SP")

    assert result.temp_k == 298.0
    client.get.assert_called_once_with(QUERY_URL.format("placeholder"))


def test_from_env_without_key(monkeypatch):
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    client = mock_client(AssertionError("must not be called"))

    with pytest.raises(WeatherServiceError, match="weather API key not configured"):
        WeatherService.from_env(client).get_temperature_by_city("São Paulo", "SP")

    client.get.assert_not_called()