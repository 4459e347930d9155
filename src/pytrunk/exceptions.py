"""Custom exception hierarchy for pytrunk."""

from __future__ import annotations


class TrunkError(Exception):
    """Base exception for all pytrunk errors."""


class TrunkConfigError(TrunkError):
    """Invalid or missing configuration."""


class TrunkTransportError(TrunkError):
    """HTTP-level failure (network, unexpected status, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class TrunkApiError(TrunkError):
    """The vehicle API answered, but not with what was asked for."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class TrunkAuthenticationError(TrunkApiError):
    """Access token rejected (HTTP 401)."""


class TrunkVehicleUnavailableError(TrunkApiError):
    """Vehicle is not reachable right now (HTTP 408).

    Usually means the car is asleep or has no connectivity.
    """


class TrunkVehicleAsleepError(TrunkApiError):
    """Vehicle did not come online within the wake polling window."""


class TrunkCommandError(TrunkApiError):
    """Command was delivered but the vehicle reported ``result: false``."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "",
        code: str = "",
        endpoint: str = "",
    ) -> None:
        self.reason = reason
        super().__init__(message, code=code, endpoint=endpoint)
