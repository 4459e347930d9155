"""Vehicle list model."""

from __future__ import annotations

from pytrunk.models._base import TrunkBaseModel, TrunkEnum


class OnlineState(TrunkEnum):
    """Connectivity state reported in the vehicle list."""

    UNKNOWN = "unknown"
    ONLINE = "online"
    ASLEEP = "asleep"
    OFFLINE = "offline"


class Vehicle(TrunkBaseModel):
    """A vehicle associated with the account.

    ``id`` addresses the vehicle in every ``/api/1/vehicles/{id}`` call;
    ``vehicle_id`` is the separate identifier used by streaming APIs.
    """

    id: int
    vehicle_id: int | None = None
    vin: str = ""
    display_name: str | None = None
    state: OnlineState = OnlineState.UNKNOWN

    @property
    def is_online(self) -> bool:
        return self.state is OnlineState.ONLINE
