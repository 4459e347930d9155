"""Session options passed to every vehicle command."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pytrunk.models.vehicle import OnlineState


class SessionOptions(BaseModel):
    """Credentials and addressing for one vehicle.

    Resolved once per target-state write and shared read-only between the
    caller path and the background actuation task.

    Parameters
    ----------
    access_token : str
        Owner API bearer token. Hidden from ``repr``.
    vehicle_id : int
        The ``id`` used in ``/api/1/vehicles/{id}`` paths.
    vin : str
        Vehicle identification number.
    state : OnlineState
        Connectivity state at the time the options were resolved.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    access_token: str = Field(repr=False)
    vehicle_id: int
    vin: str = ""
    state: OnlineState = OnlineState.UNKNOWN
