"""Resolution of Brazilian postal codes to city and state through ViaCEP."""

from __future__ import annotations

from .http_client import HTTPClient, UrllibClient
from .models import LocationInfo, ViaCEPResponse
from .validator import format_cep, is_valid_cep, normalize_cep

_VIACEP_URL = "https://viacep.com.br/ws/{cep}/json/"


class CEPServiceError(Exception):
    """A postal-code lookup could not be completed."""


class InvalidZipcodeError(CEPServiceError):
    """The postal code is not eight digits, optionally hyphenated."""

    def __init__(self) -> None:
        super().__init__("invalid zipcode")


class ZipcodeNotFoundError(CEPServiceError):
    """The postal code is well formed but unknown to the lookup service."""

    def __init__(self) -> None:
        super().__init__("can not find zipcode")


class CEPService:
    """Looks up postal codes on ViaCEP."""

    def __init__(self, http_client: HTTPClient | None = None) -> None:
        self.http_client: HTTPClient = http_client if http_client is not None else UrllibClient()

    def get_location_by_cep(self, cep: str) -> LocationInfo:
        """Return the city and state of *cep*.

        Raises InvalidZipcodeError for a malformed code, ZipcodeNotFoundError
        when the service does not know it, and CEPServiceError for transport
        or decoding failures.
        """
        if not is_valid_cep(cep):
            raise InvalidZipcodeError()

        normalized = normalize_cep(cep)
        url = _VIACEP_URL.format(cep=normalized)

        try:
            response = self.http_client.get(url)
        except OSError as err:
            raise CEPServiceError(f"error fetching CEP data: {err}") from err

        if response.status_code != 200:
            raise ZipcodeNotFoundError()

        try:
            record = ViaCEPResponse.from_dict(response.json())
        except ValueError as err:
            raise CEPServiceError(f"error decoding CEP response: {err}") from err

        if record.erro or not record.localidade:
            raise ZipcodeNotFoundError()

        return LocationInfo(city=record.localidade, state=record.uf, cep=format_cep(normalized))