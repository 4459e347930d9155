"""Coordinate target-state writes against a toggle-only trunk actuator.

A target-state write returns after a short fixed delay while the real
work (wake, re-check, actuate) runs in a detached task whose result is
never joined back into the write. The current state pushed after the
delay is an assumed value derived from the request.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pytrunk._timeouts import bounded
from pytrunk.compartments import ActuatorDescriptor
from pytrunk.config import DEFAULT_DEBOUNCE_DELAY
from pytrunk.device import DeviceApi
from pytrunk.models.state import ActuationOutcome, BinaryState, StateUpdate
from pytrunk.session import SessionOptions
from pytrunk.state_reader import StateReader

_logger = logging.getLogger(__name__)

StateUpdateCallback = Callable[[StateUpdate], None]
ActuationCallback = Callable[[ActuatorDescriptor, ActuationOutcome], None]


class ActuationCoordinator:
    """Handles reads and target-state writes for one compartment.

    Overlapping writes for the same compartment are not serialized; each
    spawns its own background actuation.
    """

    def __init__(
        self,
        api: DeviceApi,
        descriptor: ActuatorDescriptor,
        *,
        on_state_update: StateUpdateCallback,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        call_timeout: float | None = None,
        on_actuation: ActuationCallback | None = None,
        reader: StateReader | None = None,
    ) -> None:
        self._api = api
        self._descriptor = descriptor
        self._on_state_update = on_state_update
        self._debounce_delay = debounce_delay
        self._call_timeout = call_timeout
        self._on_actuation = on_actuation
        self._reader = reader or StateReader(api, descriptor, call_timeout=call_timeout)
        self._background_tasks: set[asyncio.Task[ActuationOutcome]] = set()
        self._last_target: BinaryState | None = None

    @property
    def descriptor(self) -> ActuatorDescriptor:
        return self._descriptor

    @property
    def last_target(self) -> BinaryState | None:
        """Most recently requested target, used only for the confirmation push."""
        return self._last_target

    @property
    def pending_actuations(self) -> int:
        return len(self._background_tasks)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def read_current_state(self) -> BinaryState:
        return await self._reader.read_current_state()

    async def read_target_state(self) -> BinaryState:
        return await self._reader.read_target_state()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def set_target_state(self, target: BinaryState) -> StateUpdate:
        """Request *target* and return once the assumed state has been pushed.

        Only a failure to resolve session options propagates; everything
        after dispatch happens in the background and never fails this call.
        """
        target = BinaryState(target)
        opening = target.is_open
        name = self._descriptor.name
        _logger.info("Set %s target state; opening? %s", name, opening)

        options = await self._api.fetch_options()

        self._last_target = target
        task = asyncio.create_task(
            self._actuate(opening, options),
            name=f"pytrunk-actuate-{self._descriptor.subtype}",
        )
        # The loop only keeps weak references to tasks.
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

        # The current-state change must land outside the write response.
        await asyncio.sleep(self._debounce_delay)

        update = StateUpdate.assumed(self._descriptor.subtype, target)
        self._on_state_update(update)
        return update

    async def drain(self) -> None:
        """Wait for in-flight background actuations (shutdown and tests)."""
        while self._background_tasks:
            await asyncio.gather(*list(self._background_tasks), return_exceptions=True)

    async def _actuate(self, opening: bool, options: SessionOptions) -> ActuationOutcome:
        name = self._descriptor.name
        try:
            # Commands sent to a sleeping car are silently dropped.
            await bounded(self._api.wake_up(options), self._call_timeout)

            # Sample after waking; the trunk may have moved meanwhile.
            telemetry = await bounded(self._api.fetch_vehicle_telemetry(), self._call_timeout)
            if telemetry is not None:
                opened = telemetry.is_open(self._descriptor.telemetry_field)
                if opened == opening:
                    _logger.info("%s already in desired state, skipping.", name)
                    outcome = ActuationOutcome.SKIPPED
                    self._notify(outcome)
                    return outcome

            # The command toggles; direction is decided by the check above.
            _logger.info("Actuating %s", name)
            await bounded(
                self._api.issue_command(self._descriptor.command, options, self._descriptor.api_name),
                self._call_timeout,
            )
        except Exception:  # noqa: BLE001
            _logger.warning("Actuating %s failed", name, exc_info=True)
            outcome = ActuationOutcome.FAILED
        else:
            outcome = ActuationOutcome.ACTUATED

        self._notify(outcome)
        return outcome

    def _notify(self, outcome: ActuationOutcome) -> None:
        if self._on_actuation is None:
            return
        try:
            self._on_actuation(self._descriptor, outcome)
        except Exception:  # noqa: BLE001
            _logger.debug("on_actuation callback failed", exc_info=True)
