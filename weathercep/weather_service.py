"""Current temperature lookup through WeatherAPI."""

from __future__ import annotations

import os
from urllib.parse import quote_plus

from .http_client import HTTPClient, UrllibClient
from .models import TemperatureResponse, WeatherAPIResponse
from .temperature import convert_temperatures

_WEATHER_URL = "https://api.weatherapi.com/v1/current.json?key={key}&q={query}&aqi=no"


class WeatherServiceError(Exception):
    """The weather lookup could not be completed."""


class WeatherService:
    """Fetches the current temperature of a Brazilian city."""

    def __init__(self, http_client: HTTPClient | None = None, api_key: str = "") -> None:
        self.http_client: HTTPClient = http_client if http_client is not None else UrllibClient()
        self.api_key = api_key

    @classmethod
    def from_env(cls, http_client: HTTPClient | None = None) -> WeatherService:
        """Create a service whose API key is taken from WEATHER_API_KEY."""
        return cls(http_client, os.environ.get("WEATHER_API_KEY", ""))

    def get_temperature_by_city(self, city: str, state: str) -> TemperatureResponse:
        """Return the current temperature of *city* in *state* in three scales."""
        if not self.api_key:
            raise WeatherServiceError("weather API key not configured")

        query = quote_plus(f"{city}, {state}, Brazil")
        url = _WEATHER_URL.format(key=self.api_key, query=query)

        try:
            response = self.http_client.get(url)
        except OSError as err:
            raise WeatherServiceError(f"error fetching weather data: {err}") from err

        if response.status_code != 200:
            raise WeatherServiceError(
                f"error fetching weather data: status {response.status_code}"
            )

        try:
            reply = WeatherAPIResponse.from_dict(response.json())
        except ValueError as err:
            raise WeatherServiceError(f"error decoding weather response: {err}") from err

        temp_c, temp_f, temp_k = convert_temperatures(reply.temp_c)
        return TemperatureResponse(temp_c=temp_c, temp_f=temp_f, temp_k=temp_k)