import json

import pytest

from weathercep.cep_service import (
    CEPService,
    CEPServiceError,
    InvalidZipcodeError,
    ZipcodeNotFoundError,
)
from weathercep.http_client import HTTPResponse

LOOKUP_URL = "https://viacep.com.br/ws/{}/json/"

PAULISTA = json.dumps(
    {
        "cep": "01310-100",
        "logradouro": "Avenida Paulista",
        "complemento": "",
        "bairro": "Bela Vista",
        "localidade": "São Paulo",
        "uf": "SP",
        "ibge": "3550308",
        "gia": "1004",
        "ddd": "11",
        "siafi": "7107",
    }
).encode("utf-8")

UNREACHABLE = AssertionError("must not be called")


class StubClient:
    """Answers every GET with one canned reply, or raises one canned error."""

    def __init__(self, outcome):
        self.outcome = outcome
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


@pytest.mark.parametrize("cep", ["01310-100", "01310100", " 01310100 "])
def test_success(cep):
    client = StubClient(HTTPResponse(200, PAULISTA, {"Content-Type": "application/json"}))

    result = CEPService(client).get_location_by_cep(cep)

    assert (result.city, result.state, result.cep) == ("São Paulo", "SP", "01310-100")
    assert client.urls == [LOOKUP_URL.format("01310100")]


SPECIFIC = ()
GENERIC = (InvalidZipcodeError, ZipcodeNotFoundError)


@pytest.mark.parametrize(
    ("outcome", "cep", "error", "message", "fetched", "excluded"),
    [
        (UNREACHABLE, "0131010", InvalidZipcodeError, "invalid zipcode", None, SPECIFIC),
        (UNREACHABLE, "013101000", InvalidZipcodeError, "invalid zipcode", None, SPECIFIC),
        (UNREACHABLE, "01310a00", InvalidZipcodeError, "invalid zipcode", None, SPECIFIC),
        (UNREACHABLE, "", InvalidZipcodeError, "invalid zipcode", None, SPECIFIC),
        (
            HTTPResponse(200, b'{\n    "erro": true\n}'),
            "99999-999",
            ZipcodeNotFoundError,
            "can not find zipcode",
            "99999999",
            SPECIFIC,
        ),
        (
            HTTPResponse(500, b""),
            "01310-100",
            ZipcodeNotFoundError,
            "can not find zipcode",
            "01310100",
            SPECIFIC,
        ),
        (
            HTTPResponse(200, b'{"cep": "01310-100", "localidade": "", "uf": "SP"}'),
            "01310100",
            ZipcodeNotFoundError,
            "can not find zipcode",
            "01310100",
            SPECIFIC,
        ),
        (
            ConnectionError("connection error"),
            "01310-100",
            CEPServiceError,
            "error fetching CEP data",
            "01310100",
            GENERIC,
        ),
        (
            HTTPResponse(200, b"{invalid json}"),
            "01310100",
            CEPServiceError,
            "error decoding CEP response",
            "01310100",
            GENERIC,
        ),
    ],
)
def test_failures(outcome, cep, error, message, fetched, excluded):
    client = StubClient(outcome)

    with pytest.raises(error) as excinfo:
        CEPService(client).get_location_by_cep(cep)

    assert message in str(excinfo.value)
    assert not isinstance(excinfo.value, excluded)
    assert client.urls == ([LOOKUP_URL.format(fetched)] if fetched else [])