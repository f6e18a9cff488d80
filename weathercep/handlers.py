"""HTTP request handlers for the temperature-by-postal-code API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from flask import Response

from .cep_service import InvalidZipcodeError, ZipcodeNotFoundError
from .models import LocationInfo, TemperatureResponse

_log = logging.getLogger(__name__)

_INVALID_ZIPCODE = "invalid zipcode"
_ZIPCODE_NOT_FOUND = "can not find zipcode"


class _LocationLookup(Protocol):
    def get_location_by_cep(self, cep: str) -> LocationInfo: ...


class _TemperatureLookup(Protocol):
    def get_temperature_by_city(self, city: str, state: str) -> TemperatureResponse: ...


def _text(status: int, message: str) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def _json(status: int, payload: Any) -> Response:
    return Response(json.dumps(payload), status=status, mimetype="application/json")


def _location_error_response(err: Exception) -> Response:
    message = str(err)
    if isinstance(err, InvalidZipcodeError) or _INVALID_ZIPCODE in message:
        return _text(422, _INVALID_ZIPCODE)
    if isinstance(err, ZipcodeNotFoundError) or _ZIPCODE_NOT_FOUND in message:
        return _text(404, _ZIPCODE_NOT_FOUND)
    _log.error("postal code lookup failed: %s", message)
    return _text(500, "internal server error")


class WeatherHandler:
    """Serves the temperature and health-check endpoints."""

    def __init__(self, cep_service: _LocationLookup, weather_service: _TemperatureLookup) -> None:
        self.cep_service = cep_service
        self.weather_service = weather_service

    def get_temperature_by_cep(self, cep: str) -> Response:
        """Answer GET /temperature/<cep> with the current temperature in three scales."""
        if not cep:
            return _text(422, _INVALID_ZIPCODE)

        try:
            location = self.cep_service.get_location_by_cep(cep)
        except Exception as err:
            return _location_error_response(err)

        try:
            temperature = self.weather_service.get_temperature_by_city(
                location.city, location.state
            )
        except Exception as err:
            _log.error("weather lookup failed: %s", err)
            return _text(500, "error fetching weather data")

        return _json(200, temperature.to_dict())

    def health_check(self) -> Response:
        """Answer GET /health."""
        return _json(200, {"status": "ok", "message": "Weather CEP API is running"})