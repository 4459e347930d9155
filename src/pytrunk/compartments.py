"""Static descriptors for the trunk compartments a vehicle exposes."""

from __future__ import annotations

import dataclasses

from pytrunk.models.command import TrunkCommand


@dataclasses.dataclass(frozen=True)
class ActuatorDescriptor:
    """Identifies the physical compartment a coordinator controls.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"Front Trunk"``.
    subtype : str
        Lock-protocol service subtype, unique per vehicle.
    api_name : str
        ``which_trunk`` value sent with the actuate command.
    telemetry_field : str
        ``vehicle_state`` flag reporting whether this compartment is open.
    command : TrunkCommand
        Command issued to toggle the compartment.
    """

    name: str
    subtype: str
    api_name: str
    telemetry_field: str
    command: TrunkCommand = TrunkCommand.ACTUATE_TRUNK


FRONT_TRUNK = ActuatorDescriptor(
    name="Front Trunk",
    subtype="frontTrunk",
    api_name="front",
    telemetry_field="ft",
)

REAR_TRUNK = ActuatorDescriptor(
    name="Trunk",
    subtype="trunk",
    api_name="rear",
    telemetry_field="rt",
)

COMPARTMENTS: tuple[ActuatorDescriptor, ...] = (FRONT_TRUNK, REAR_TRUNK)
