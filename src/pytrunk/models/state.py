"""Lock-protocol state vocabulary.

The lock-mechanism protocol only understands two values. Reads produce
*observed* states from telemetry; the confirmation pushed after a
target-state write is an *assumed* state built from the request alone.
The two are kept distinct in :class:`StateUpdate` so nothing downstream
mistakes an optimistic echo for a sensor reading.
"""

from __future__ import annotations

import enum
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BinaryState(enum.IntEnum):
    """Current/target lock state, using the protocol's wire values."""

    UNSECURED = 0
    SECURED = 1

    @classmethod
    def from_open(cls, is_open: bool) -> BinaryState:
        return cls.UNSECURED if is_open else cls.SECURED

    @property
    def is_open(self) -> bool:
        return self is BinaryState.UNSECURED


class StateOrigin(enum.StrEnum):
    OBSERVED = "observed"
    ASSUMED = "assumed"


class ActuationOutcome(enum.StrEnum):
    """How a background actuation ended."""

    ACTUATED = "actuated"
    SKIPPED = "skipped"
    FAILED = "failed"


class StateUpdate(BaseModel):
    """A current-state value pushed to the lock protocol."""

    model_config = ConfigDict(frozen=True)

    subtype: str
    state: BinaryState
    origin: StateOrigin
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("emitted_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @classmethod
    def assumed(cls, subtype: str, state: BinaryState) -> StateUpdate:
        """Build an optimistic update derived from a requested target."""
        return cls(subtype=subtype, state=state, origin=StateOrigin.ASSUMED)

    @classmethod
    def observed(cls, subtype: str, state: BinaryState) -> StateUpdate:
        return cls(subtype=subtype, state=state, origin=StateOrigin.OBSERVED)

    @property
    def is_assumed(self) -> bool:
        return self.origin is StateOrigin.ASSUMED
