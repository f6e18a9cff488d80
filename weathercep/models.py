"""Data models for the postal-code and weather lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _boolean(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean")
    return value


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


@dataclass
class ViaCEPResponse:
    """A postal-code record as returned by the ViaCEP service."""

    cep: str = ""
    logradouro: str = ""
    complemento: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    ibge: str = ""
    gia: str = ""
    ddd: str = ""
    siafi: str = ""
    erro: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> ViaCEPResponse:
        """Build a record from decoded JSON; missing fields take empty values."""
        data = _as_mapping(data, "CEP response")
        return cls(
            cep=_string(data, "cep"),
            logradouro=_string(data, "logradouro"),
            complemento=_string(data, "complemento"),
            bairro=_string(data, "bairro"),
            localidade=_string(data, "localidade"),
            uf=_string(data, "uf"),
            ibge=_string(data, "ibge"),
            gia=_string(data, "gia"),
            ddd=_string(data, "ddd"),
            siafi=_string(data, "siafi"),
            erro=_boolean(data, "erro"),
        )


@dataclass(frozen=True)
class LocationInfo:
    """City and state resolved from a postal code."""

    city: str
    state: str
    cep: str

    def to_dict(self) -> dict[str, str]:
        return {"city": self.city, "state": self.state, "cep": self.cep}


@dataclass
class WeatherAPIResponse:
    """The parts of a WeatherAPI current-conditions reply that are used."""

    location_name: str = ""
    location_region: str = ""
    location_country: str = ""
    temp_c: float = 0.0
    temp_f: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> WeatherAPIResponse:
        """Build a reply from decoded JSON; missing fields take zero values."""
        data = _as_mapping(data, "weather response")
        location = _as_mapping(data.get("location"), "field 'location'")
        current = _as_mapping(data.get("current"), "field 'current'")
        return cls(
            location_name=_string(location, "name"),
            location_region=_string(location, "region"),
            location_country=_string(location, "country"),
            temp_c=_number(current, "temp_c"),
            temp_f=_number(current, "temp_f"),
        )


@dataclass(frozen=True)
class TemperatureResponse:
    """A temperature in Celsius, Fahrenheit and Kelvin."""

    temp_c: float
    temp_f: float
    temp_k: float

    def to_dict(self) -> dict[str, float]:
        return {"temp_C": self.temp_c, "temp_F": self.temp_f, "temp_K": self.temp_k}


@dataclass(frozen=True)
class ErrorResponse:
    """An error message body."""

    message: str

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}