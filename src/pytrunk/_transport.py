"""HTTP transport for the vehicle owner API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pytrunk._constants import USER_AGENT
from pytrunk._redact import redact_for_log
from pytrunk.config import TrunkConfig
from pytrunk.exceptions import (
    TrunkAuthenticationError,
    TrunkTransportError,
    TrunkVehicleUnavailableError,
)

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by :class:`pytrunk.client.TeslaClient`.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        access_token: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTPS transport with bearer authentication.

    Successful replies arrive wrapped as ``{"response": ...}``; the
    wrapper is removed before returning.
    """

    def __init__(self, config: TrunkConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        access_token: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        headers: dict[str, str] = {
            "accept": "application/json",
            "authorization": f"Bearer {access_token}",
            "user-agent": USER_AGENT,
        }
        url = f"{self._config.base_url}{endpoint}"

        _logger.debug("%s %s payload=%s", method, url, redact_for_log(payload))

        try:
            async with self._http.request(
                method,
                url,
                json=dict(payload) if payload is not None else None,
                headers=headers,
            ) as resp:
                status = resp.status
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise TrunkTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        if status == 401:
            raise TrunkAuthenticationError(
                f"Access token rejected by {endpoint}",
                code="401",
                endpoint=endpoint,
            )
        if status == 408:
            raise TrunkVehicleUnavailableError(
                f"Vehicle unavailable for {endpoint}",
                code="408",
                endpoint=endpoint,
            )
        if status != 200:
            raise TrunkTransportError(
                f"HTTP {status} from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            )

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise TrunkTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
            ) from exc

        if not isinstance(body, dict) or "response" not in body:
            raise TrunkTransportError(
                f"Missing 'response' field from {endpoint}",
                status_code=status,
                endpoint=endpoint,
            )

        _logger.debug("%s %s -> %s", method, url, redact_for_log(body["response"]))
        return body["response"]
