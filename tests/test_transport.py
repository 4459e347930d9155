from __future__ import annotations

import json
from typing import Any

import aiohttp
import pytest

from pytrunk._transport import HttpTransport
from pytrunk.config import TrunkConfig
from pytrunk.exceptions import (
    TrunkAuthenticationError,
    TrunkTransportError,
    TrunkVehicleUnavailableError,
)


class _FakeResponse:
    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self._text = text

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> _FakeResponse:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None


class _FakeHttpSession:
    def __init__(self, status: int = 200, text: str = "", error: Exception | None = None) -> None:
        self.status = status
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return _FakeResponse(self.status, self.text)


def _transport(http: _FakeHttpSession) -> HttpTransport:
    config = TrunkConfig(access_token="config-token", base_url="https://api.example")
    return HttpTransport(config, http)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_unwraps_response_and_sends_bearer_token() -> None:
    http = _FakeHttpSession(text=json.dumps({"response": {"result": True}}))

    result = await _transport(http).request(
        "POST",
        "/api/1/vehicles/1/command/actuate_trunk",
        access_token="abc",
        payload={"which_trunk": "rear"},
    )

    assert result == {"result": True}
    call = http.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://api.example/api/1/vehicles/1/command/actuate_trunk"
    assert call["headers"]["authorization"] == "Bearer abc"
    assert call["json"] == {"which_trunk": "rear"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (401, TrunkAuthenticationError),
        (408, TrunkVehicleUnavailableError),
        (500, TrunkTransportError),
    ],
)
async def test_status_codes_map_to_exceptions(status: int, error_type: type[Exception]) -> None:
    http = _FakeHttpSession(status=status, text="{}")

    with pytest.raises(error_type):
        await _transport(http).request("GET", "/api/1/vehicles", access_token="abc")


@pytest.mark.asyncio
async def test_non_200_keeps_status_code() -> None:
    http = _FakeHttpSession(status=503, text="busy")

    with pytest.raises(TrunkTransportError) as exc_info:
        await _transport(http).request("GET", "/api/1/vehicles", access_token="abc")

    assert exc_info.value.status_code == 503
    assert exc_info.value.endpoint == "/api/1/vehicles"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["not json", json.dumps({"error": "nope"}), json.dumps([1, 2])])
async def test_malformed_body_raises(text: str) -> None:
    http = _FakeHttpSession(text=text)

    with pytest.raises(TrunkTransportError):
        await _transport(http).request("GET", "/api/1/vehicles", access_token="abc")


@pytest.mark.asyncio
async def test_client_error_is_wrapped() -> None:
    http = _FakeHttpSession(error=aiohttp.ClientConnectionError("down"))

    with pytest.raises(TrunkTransportError, match="failed"):
        await _transport(http).request("GET", "/api/1/vehicles", access_token="abc")
