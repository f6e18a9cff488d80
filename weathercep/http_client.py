"""A minimal HTTP GET client interface and a standard-library implementation."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class HTTPResponse:
    """A completed HTTP response with its whole body read."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON; raises ValueError if it is not valid JSON."""
        return json.loads(self.body.decode("utf-8"))


@runtime_checkable
class HTTPClient(Protocol):
    """Anything that can perform an HTTP GET request."""

    def get(self, url: str) -> HTTPResponse:
        """Fetch *url*; raise OSError when no response could be obtained."""


class UrllibClient:
    """HTTPClient backed by urllib; non-2xx statuses are returned, not raised."""

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def get(self, url: str) -> HTTPResponse:
        request = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as resp:
                return HTTPResponse(resp.status, resp.read(), dict(resp.headers.items()))
        except urllib.error.HTTPError as err:
            with err:
                headers = dict(err.headers.items()) if err.headers is not None else {}
                return HTTPResponse(err.code, err.read(), headers)