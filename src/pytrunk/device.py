"""Structural interface of the remote vehicle API.

:class:`pytrunk.client.TeslaClient` is the production implementation;
tests pass small fakes.
"""

from __future__ import annotations

from typing import Protocol

from pytrunk.models.command import TrunkCommand
from pytrunk.models.telemetry import VehicleTelemetry
from pytrunk.session import SessionOptions


class DeviceApi(Protocol):
    async def fetch_options(self) -> SessionOptions:
        """Resolve credentials and vehicle addressing. May raise."""
        ...

    async def wake_up(self, options: SessionOptions) -> None:
        """Wake the vehicle and return once it is online. May block for seconds."""
        ...

    async def fetch_vehicle_telemetry(self) -> VehicleTelemetry | None:
        """Return a telemetry snapshot, or ``None`` when the vehicle is unreachable."""
        ...

    async def issue_command(
        self,
        command: TrunkCommand,
        options: SessionOptions,
        api_name: str,
    ) -> None:
        ...
