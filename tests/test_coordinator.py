from __future__ import annotations

import asyncio
import time

import pytest
from _fakes import FakeDeviceApi, Recorder, make_telemetry

from pytrunk.compartments import FRONT_TRUNK, REAR_TRUNK
from pytrunk.coordinator import ActuationCoordinator
from pytrunk.exceptions import TrunkApiError
from pytrunk.models.command import TrunkCommand
from pytrunk.models.state import ActuationOutcome, BinaryState, StateOrigin

_DELAY = 0.05


def _coordinator(
    api: FakeDeviceApi,
    *,
    descriptor=REAR_TRUNK,
    call_timeout: float | None = None,
) -> tuple[ActuationCoordinator, Recorder, Recorder]:
    pushed = Recorder()
    outcomes = Recorder()
    coordinator = ActuationCoordinator(
        api,
        descriptor,
        on_state_update=pushed,
        debounce_delay=_DELAY,
        call_timeout=call_timeout,
        on_actuation=outcomes,
    )
    return coordinator, pushed, outcomes


@pytest.mark.asyncio
async def test_set_target_returns_after_debounce_not_device_latency() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), latency=0.5)
    coordinator, pushed, _ = _coordinator(api)

    started = time.monotonic()
    await coordinator.set_target_state(BinaryState.UNSECURED)
    elapsed = time.monotonic() - started

    assert _DELAY <= elapsed < 0.4
    assert len(pushed.calls) == 1
    assert coordinator.pending_actuations == 1
    assert api.commands == []

    await coordinator.drain()
    assert len(api.commands) == 1
    assert coordinator.pending_actuations == 0


@pytest.mark.asyncio
async def test_background_sequence_wakes_before_sampling_telemetry() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0))
    coordinator, _, _ = _coordinator(api)

    await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert api.calls == ["options", "wake", "telemetry", "command"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("rt", "target"),
    [(1, BinaryState.UNSECURED), (0, BinaryState.SECURED)],
)
async def test_no_command_when_trunk_already_in_requested_state(rt: int, target: BinaryState) -> None:
    api = FakeDeviceApi(make_telemetry(rt=rt))
    coordinator, pushed, outcomes = _coordinator(api)

    await coordinator.set_target_state(target)
    await coordinator.drain()

    assert api.commands == []
    assert outcomes.calls == [(REAR_TRUNK, ActuationOutcome.SKIPPED)]
    assert pushed.calls[0][0].state is target


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("rt", "target"),
    [(0, BinaryState.UNSECURED), (1, BinaryState.SECURED)],
)
async def test_same_toggle_command_issued_for_either_direction(rt: int, target: BinaryState) -> None:
    api = FakeDeviceApi(make_telemetry(rt=rt))
    coordinator, _, outcomes = _coordinator(api)

    await coordinator.set_target_state(target)
    await coordinator.drain()

    assert len(api.commands) == 1
    command, options, api_name = api.commands[0]
    assert command is TrunkCommand.ACTUATE_TRUNK
    assert options.vehicle_id == 1
    assert api_name == "rear"
    assert outcomes.calls == [(REAR_TRUNK, ActuationOutcome.ACTUATED)]


@pytest.mark.asyncio
async def test_front_trunk_guard_reads_front_flag() -> None:
    # Rear open, front closed: opening the front trunk must still actuate.
    api = FakeDeviceApi(make_telemetry(ft=0, rt=1))
    coordinator, _, _ = _coordinator(api, descriptor=FRONT_TRUNK)

    await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert [c[2] for c in api.commands] == ["front"]


@pytest.mark.asyncio
async def test_missing_telemetry_after_wake_still_actuates() -> None:
    api = FakeDeviceApi(None)
    coordinator, _, _ = _coordinator(api)

    await coordinator.set_target_state(BinaryState.SECURED)
    await coordinator.drain()

    assert len(api.commands) == 1


@pytest.mark.asyncio
async def test_confirmation_is_assumed_even_when_device_fails() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), fail={"wake", "telemetry", "command"})
    coordinator, pushed, _ = _coordinator(api)

    update = await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert update.state is BinaryState.UNSECURED
    assert update.origin is StateOrigin.ASSUMED
    assert update.is_assumed
    assert update.subtype == "trunk"
    assert pushed.calls == [(update,)]
    assert coordinator.last_target is BinaryState.UNSECURED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("failing_step", "expected_calls"),
    [
        ("wake", ["options", "wake"]),
        ("telemetry", ["options", "wake", "telemetry"]),
        ("command", ["options", "wake", "telemetry", "command"]),
    ],
)
async def test_background_failures_are_swallowed(failing_step: str, expected_calls: list[str]) -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), fail={failing_step})
    coordinator, pushed, outcomes = _coordinator(api)

    update = await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert update.state is BinaryState.UNSECURED
    assert len(pushed.calls) == 1
    assert api.calls == expected_calls
    assert api.commands == []
    assert outcomes.calls == [(REAR_TRUNK, ActuationOutcome.FAILED)]


@pytest.mark.asyncio
async def test_options_failure_propagates_and_spawns_nothing() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), options_error=TrunkApiError("no vehicles"))
    coordinator, pushed, outcomes = _coordinator(api)

    with pytest.raises(TrunkApiError):
        await coordinator.set_target_state(BinaryState.UNSECURED)

    await asyncio.sleep(_DELAY * 2)
    assert api.calls == ["options"]
    assert coordinator.pending_actuations == 0
    assert pushed.calls == []
    assert outcomes.calls == []
    assert coordinator.last_target is None


@pytest.mark.asyncio
async def test_call_timeout_turns_slow_wake_into_failure() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), latency=1.0)
    coordinator, pushed, outcomes = _coordinator(api, call_timeout=0.05)

    await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert api.calls == ["options", "wake"]
    assert api.commands == []
    assert outcomes.calls == [(REAR_TRUNK, ActuationOutcome.FAILED)]
    assert len(pushed.calls) == 1


@pytest.mark.asyncio
async def test_overlapping_writes_each_spawn_an_actuation() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0), latency=0.1)
    coordinator, pushed, _ = _coordinator(api)

    await asyncio.gather(
        coordinator.set_target_state(BinaryState.UNSECURED),
        coordinator.set_target_state(BinaryState.UNSECURED),
    )
    assert coordinator.pending_actuations == 2

    await coordinator.drain()
    # Telemetry never changes in the fake, so both toggles go out.
    assert len(api.commands) == 2
    assert len(pushed.calls) == 2


@pytest.mark.asyncio
async def test_actuation_hook_errors_do_not_escape() -> None:
    api = FakeDeviceApi(make_telemetry(rt=0))

    def _broken_hook(*_args: object) -> None:
        raise RuntimeError("hook")

    coordinator = ActuationCoordinator(
        api,
        REAR_TRUNK,
        on_state_update=Recorder(),
        debounce_delay=_DELAY,
        on_actuation=_broken_hook,
    )

    await coordinator.set_target_state(BinaryState.UNSECURED)
    await coordinator.drain()

    assert len(api.commands) == 1


@pytest.mark.asyncio
async def test_reads_share_one_algorithm() -> None:
    api = FakeDeviceApi(make_telemetry(rt=1))
    coordinator, _, _ = _coordinator(api)

    assert await coordinator.read_current_state() is BinaryState.UNSECURED
    assert await coordinator.read_target_state() is BinaryState.UNSECURED
    assert api.calls == ["telemetry", "telemetry"]
