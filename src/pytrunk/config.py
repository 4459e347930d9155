"""Client configuration for pytrunk."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable
from typing import Any

from pytrunk.exceptions import TrunkConfigError

DEFAULT_BASE_URL = "https://owner-api.teslamotors.com"

#: Seconds between acknowledging a target-state write and pushing the
#: current-state update. Lock-mechanism clients drop a current-state change
#: that arrives inside the same write response.
DEFAULT_DEBOUNCE_DELAY: float = 1.0


def _parse_env(name: str, raw: str, parser: Callable[[str], Any]) -> Any:
    try:
        return parser(raw.strip())
    except ValueError as exc:
        raise TrunkConfigError(f"{name} has an invalid value: {raw!r}") from exc


@dataclasses.dataclass(frozen=True)
class TrunkConfig:
    """Client configuration.

    Parameters
    ----------
    access_token : str
        Owner API bearer token.
    vin : str or None
        VIN of the vehicle to control. When ``None`` the first vehicle on
        the account is used.
    vehicle_name : str
        Prefix for the service names exposed to the lock protocol
        (e.g. ``"Tesla Front Trunk"``).
    base_url : str
        Owner API base URL.
    debounce_delay : float
        Seconds to wait after a target-state write before confirming the
        new current state.
    call_timeout : float or None
        Optional bound, in seconds, on each remote call made while reading
        state or actuating. ``None`` waits indefinitely.
    wake_poll_attempts : int
        How many times to poll the vehicle state after a wake request.
    wake_poll_interval : float
        Seconds between wake polls.
    """

    access_token: str
    vin: str | None = None
    vehicle_name: str = "Tesla"
    base_url: str = DEFAULT_BASE_URL
    debounce_delay: float = DEFAULT_DEBOUNCE_DELAY
    call_timeout: float | None = None
    wake_poll_attempts: int = 30
    wake_poll_interval: float = 1.0

    def __post_init__(self) -> None:
        if not self.access_token or not self.access_token.strip():
            raise TrunkConfigError("access_token must be non-empty")
        if self.debounce_delay < 0:
            raise TrunkConfigError("debounce_delay must be >= 0")
        if self.call_timeout is not None and self.call_timeout <= 0:
            raise TrunkConfigError("call_timeout must be > 0 when set")
        if self.wake_poll_attempts < 1:
            raise TrunkConfigError("wake_poll_attempts must be >= 1")
        if self.wake_poll_interval < 0:
            raise TrunkConfigError("wake_poll_interval must be >= 0")

    @classmethod
    def from_env(cls, **overrides: Any) -> TrunkConfig:
        """Create configuration from environment variables.

        Reads ``TESLA_ACCESS_TOKEN`` and the optional ``TESLA_*``
        variables. Explicit keyword arguments override environment values.

        Raises
        ------
        TrunkConfigError
            When no access token is available or a numeric variable does
            not parse.
        """
        env = os.environ

        _ENV_CONFIG_MAP: dict[str, tuple[str, Callable[[str], Any]]] = {
            "TESLA_ACCESS_TOKEN": ("access_token", str),
            "TESLA_VIN": ("vin", str),
            "TESLA_VEHICLE_NAME": ("vehicle_name", str),
            "TESLA_BASE_URL": ("base_url", str),
            "TESLA_DEBOUNCE_DELAY": ("debounce_delay", float),
            "TESLA_CALL_TIMEOUT": ("call_timeout", float),
            "TESLA_WAKE_POLL_ATTEMPTS": ("wake_poll_attempts", int),
            "TESLA_WAKE_POLL_INTERVAL": ("wake_poll_interval", float),
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, (field_name, parser) in _ENV_CONFIG_MAP.items():
            if field_name in overrides:
                continue
            val = env.get(env_key)
            if val is None or not val.strip():
                continue
            config_kwargs[field_name] = _parse_env(env_key, val, parser)

        config_kwargs.update(overrides)

        if "access_token" not in config_kwargs:
            raise TrunkConfigError("TESLA_ACCESS_TOKEN is not set")

        return cls(**config_kwargs)
