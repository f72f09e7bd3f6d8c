from __future__ import annotations

import asyncio

import pytest
import requests

from framing.elevation import OpenElevationClient
from framing.errors import ElevationLookupFailure


class FakeResponse:
    def __init__(self, payload: object, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> object:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, response: FakeResponse | Exception) -> None:
        self.response = response
        self.calls: list[dict[str, object]] = []

    def get(self, url: str, **kwargs: object) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def test_lookup_parses_first_result() -> None:
    session = FakeSession(FakeResponse({"results": [{"latitude": 36.1, "longitude": -115.2, "elevation": 610.5}]}))
    client = OpenElevationClient(url="https://elevation.test/lookup", timeout=3, session=session)

    assert asyncio.run(client(36.1, -115.2)) == 610.5
    assert session.calls[0]["url"] == "https://elevation.test/lookup"
    assert session.calls[0]["params"] == {"locations": "36.1,-115.2"}
    assert session.calls[0]["timeout"] == 3


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("unreachable"),
        requests.Timeout("too slow"),
        FakeResponse({}, status_code=503),
        FakeResponse(ValueError("bad json")),
        FakeResponse({"results": []}),
        FakeResponse({"results": [{"elevation": None}]}),
        FakeResponse(["unexpected"]),
    ],
)
def test_lookup_failures_raise_elevation_failure(response) -> None:
    client = OpenElevationClient(url="https://elevation.test/lookup", session=FakeSession(response))

    with pytest.raises(ElevationLookupFailure) as excinfo:
        client.lookup(1.0, 2.0)
    assert excinfo.value.context["lat"] == 1.0
    assert excinfo.value.context["lng"] == 2.0
