"""Remote command names and acknowledgement model."""

from __future__ import annotations

import enum

from pytrunk.models._base import TrunkBaseModel


class TrunkCommand(enum.StrEnum):
    """``/command/{name}`` values used by this library.

    ``actuate_trunk`` is direction-agnostic: it toggles the selected
    trunk. On cars without a powered liftgate it only ever pops the
    latch open.
    """

    ACTUATE_TRUNK = "actuate_trunk"


class CommandResult(TrunkBaseModel):
    """Acknowledgement returned by every ``/command`` endpoint."""

    result: bool = False
    reason: str = ""
