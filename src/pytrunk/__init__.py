"""pytrunk - expose toggle-only vehicle trunks as lock-mechanism services."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytrunk")
except PackageNotFoundError:
    __version__ = "0+local"
from pytrunk.client import TeslaClient
from pytrunk.compartments import COMPARTMENTS, FRONT_TRUNK, REAR_TRUNK, ActuatorDescriptor
from pytrunk.config import TrunkConfig
from pytrunk.coordinator import ActuationCoordinator
from pytrunk.device import DeviceApi
from pytrunk.exceptions import (
    TrunkApiError,
    TrunkAuthenticationError,
    TrunkCommandError,
    TrunkConfigError,
    TrunkError,
    TrunkTransportError,
    TrunkVehicleAsleepError,
    TrunkVehicleUnavailableError,
)
from pytrunk.models import (
    ActuationOutcome,
    BinaryState,
    OnlineState,
    StateOrigin,
    StateUpdate,
    TrunkCommand,
    Vehicle,
    VehicleTelemetry,
)
from pytrunk.service import LockCharacteristic, LockMechanismService, build_trunk_services
from pytrunk.session import SessionOptions
from pytrunk.state_reader import StateReader

__all__ = [
    "__version__",
    "COMPARTMENTS",
    "FRONT_TRUNK",
    "REAR_TRUNK",
    "ActuationCoordinator",
    "ActuationOutcome",
    "ActuatorDescriptor",
    "BinaryState",
    "DeviceApi",
    "LockCharacteristic",
    "LockMechanismService",
    "OnlineState",
    "SessionOptions",
    "StateOrigin",
    "StateReader",
    "StateUpdate",
    "TeslaClient",
    "TrunkApiError",
    "TrunkAuthenticationError",
    "TrunkCommand",
    "TrunkCommandError",
    "TrunkConfig",
    "TrunkConfigError",
    "TrunkError",
    "TrunkTransportError",
    "TrunkVehicleAsleepError",
    "TrunkVehicleUnavailableError",
    "Vehicle",
    "VehicleTelemetry",
    "build_trunk_services",
]
