"""Vehicle telemetry snapshot."""

from __future__ import annotations

from pydantic import Field

from pytrunk.models._base import EpochTimestamp, TrunkBaseModel
from pytrunk.models.vehicle import OnlineState


class VehicleStateSnapshot(TrunkBaseModel):
    """The ``vehicle_state`` section of ``vehicle_data``.

    Trunk flags are integers; any non-zero value means open.
    """

    ft: int = 0
    """Front trunk (frunk) open flag."""
    rt: int = 0
    """Rear trunk open flag."""
    locked: bool | None = None
    timestamp: EpochTimestamp = None

    @property
    def front_trunk_open(self) -> bool:
        return bool(self.ft)

    @property
    def rear_trunk_open(self) -> bool:
        return bool(self.rt)


class VehicleTelemetry(TrunkBaseModel):
    """Point-in-time snapshot returned by ``vehicle_data``."""

    id: int | None = None
    vin: str = ""
    state: OnlineState = OnlineState.UNKNOWN
    vehicle_state: VehicleStateSnapshot = Field(default_factory=VehicleStateSnapshot)

    def is_open(self, telemetry_field: str) -> bool:
        """Return the open flag named by *telemetry_field* (``"ft"`` or ``"rt"``)."""
        return bool(getattr(self.vehicle_state, telemetry_field, 0))
