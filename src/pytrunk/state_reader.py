"""Map vehicle telemetry onto the lock protocol's two-state vocabulary."""

from __future__ import annotations

import logging

from pytrunk._timeouts import bounded
from pytrunk.compartments import ActuatorDescriptor
from pytrunk.device import DeviceApi
from pytrunk.models.state import BinaryState
from pytrunk.models.telemetry import VehicleTelemetry

_logger = logging.getLogger(__name__)


def telemetry_to_state(telemetry: VehicleTelemetry | None, descriptor: ActuatorDescriptor) -> BinaryState:
    """Translate one telemetry snapshot for *descriptor*.

    A missing snapshot means the car is not connected; it is reported as
    closed.
    """
    if telemetry is None:
        return BinaryState.SECURED
    return BinaryState.from_open(telemetry.is_open(descriptor.telemetry_field))


class StateReader:
    """Answers current/target state queries for one compartment.

    The vehicle has no notion of a pending target, so both queries
    return the same freshly sampled physical state.
    """

    def __init__(
        self,
        api: DeviceApi,
        descriptor: ActuatorDescriptor,
        *,
        call_timeout: float | None = None,
    ) -> None:
        self._api = api
        self._descriptor = descriptor
        self._call_timeout = call_timeout

    @property
    def descriptor(self) -> ActuatorDescriptor:
        return self._descriptor

    async def read_current_state(self) -> BinaryState:
        return await self._read_state("current")

    async def read_target_state(self) -> BinaryState:
        return await self._read_state("target")

    async def _read_state(self, label: str) -> BinaryState:
        try:
            telemetry = await bounded(self._api.fetch_vehicle_telemetry(), self._call_timeout)
        except Exception:  # noqa: BLE001
            _logger.debug("Telemetry fetch failed for %s; assuming closed", self._descriptor.name, exc_info=True)
            telemetry = None

        state = telemetry_to_state(telemetry, self._descriptor)
        _logger.debug("Get %s %s state; opened? %s", self._descriptor.name, label, state.is_open)
        return state
