"""Lock-mechanism protocol adapter for trunk compartments.

Each compartment is exposed as a lock: ``SECURED`` means closed and
``UNSECURED`` means open. This module holds the characteristic handlers
and the current-state push path; registering the service with an actual
accessory server is left to the caller.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

from pytrunk.compartments import COMPARTMENTS, ActuatorDescriptor
from pytrunk.config import TrunkConfig
from pytrunk.coordinator import ActuationCallback, ActuationCoordinator
from pytrunk.device import DeviceApi
from pytrunk.exceptions import TrunkError
from pytrunk.models.state import BinaryState, StateUpdate

_logger = logging.getLogger(__name__)


class LockCharacteristic(enum.StrEnum):
    CURRENT = "LockCurrentState"
    TARGET = "LockTargetState"


CharacteristicListener = Callable[[LockCharacteristic, BinaryState, StateUpdate], None]


class LockMechanismService:
    """One lock-mechanism service bound to one :class:`ActuationCoordinator`."""

    def __init__(self, coordinator: ActuationCoordinator, *, vehicle_name: str) -> None:
        self._coordinator = coordinator
        self._vehicle_name = vehicle_name
        self._values: dict[LockCharacteristic, BinaryState] = {}
        self._listeners: list[CharacteristicListener] = []

    @classmethod
    def create(
        cls,
        api: DeviceApi,
        descriptor: ActuatorDescriptor,
        config: TrunkConfig,
        *,
        on_actuation: ActuationCallback | None = None,
    ) -> LockMechanismService:
        """Build a service and the coordinator that feeds it."""
        service: LockMechanismService

        def _push(update: StateUpdate) -> None:
            service.update_characteristic(LockCharacteristic.CURRENT, update)

        coordinator = ActuationCoordinator(
            api,
            descriptor,
            on_state_update=_push,
            debounce_delay=config.debounce_delay,
            call_timeout=config.call_timeout,
            on_actuation=on_actuation,
        )
        service = cls(coordinator, vehicle_name=config.vehicle_name)
        return service

    @property
    def coordinator(self) -> ActuationCoordinator:
        return self._coordinator

    @property
    def service_name(self) -> str:
        return f"{self._vehicle_name} {self._coordinator.descriptor.name}"

    @property
    def subtype(self) -> str:
        return self._coordinator.descriptor.subtype

    def value(self, characteristic: LockCharacteristic) -> BinaryState | None:
        """Last value read or pushed for *characteristic*."""
        return self._values.get(characteristic)

    def subscribe(self, listener: CharacteristicListener) -> Callable[[], None]:
        """Register *listener* for pushed characteristic changes.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def handle_get(self, characteristic: LockCharacteristic) -> BinaryState:
        try:
            if characteristic is LockCharacteristic.CURRENT:
                state = await self._coordinator.read_current_state()
            else:
                state = await self._coordinator.read_target_state()
        except Exception:
            _logger.exception("Get %s %s failed", self.service_name, characteristic)
            raise
        self._values[characteristic] = state
        return state

    async def handle_set(self, characteristic: LockCharacteristic, value: int) -> None:
        if characteristic is not LockCharacteristic.TARGET:
            raise TrunkError(f"{characteristic} is read-only")
        target = BinaryState(value)
        try:
            await self._coordinator.set_target_state(target)
        except Exception:
            _logger.exception("Set %s %s failed", self.service_name, characteristic)
            raise
        self._values[LockCharacteristic.TARGET] = target

    def update_characteristic(self, characteristic: LockCharacteristic, update: StateUpdate) -> None:
        """Cache *update* and push it to every listener."""
        self._values[characteristic] = update.state
        for listener in list(self._listeners):
            try:
                listener(characteristic, update.state, update)
            except Exception:  # noqa: BLE001
                _logger.debug("Characteristic listener failed for %s", self.service_name, exc_info=True)


def build_trunk_services(
    api: DeviceApi,
    config: TrunkConfig,
    *,
    on_actuation: ActuationCallback | None = None,
) -> list[LockMechanismService]:
    """Create one service per known compartment (front, rear)."""
    return [
        LockMechanismService.create(api, descriptor, config, on_actuation=on_actuation)
        for descriptor in COMPARTMENTS
    ]
