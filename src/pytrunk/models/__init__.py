"""Data models for owner API responses and the lock-protocol vocabulary."""

from pytrunk.models._base import EpochTimestamp, TrunkBaseModel, TrunkEnum, parse_epoch_timestamp
from pytrunk.models.command import CommandResult, TrunkCommand
from pytrunk.models.state import ActuationOutcome, BinaryState, StateOrigin, StateUpdate
from pytrunk.models.telemetry import VehicleStateSnapshot, VehicleTelemetry
from pytrunk.models.vehicle import OnlineState, Vehicle

__all__ = [
    "ActuationOutcome",
    "BinaryState",
    "CommandResult",
    "EpochTimestamp",
    "OnlineState",
    "StateOrigin",
    "StateUpdate",
    "TrunkBaseModel",
    "TrunkCommand",
    "TrunkEnum",
    "Vehicle",
    "VehicleStateSnapshot",
    "VehicleTelemetry",
    "parse_epoch_timestamp",
]
