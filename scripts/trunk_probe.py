#!/usr/bin/env python3
"""Read or drive the trunks of a vehicle through the lock adapter.

Usage
-----
Set environment variables and run::

    export TESLA_ACCESS_TOKEN="..."
    python scripts/trunk_probe.py

Options::

    --vin 5YJ...           Vehicle to use (default: first on the account)
    --open front|rear      Request the trunk open
    --close front|rear     Request the trunk closed
    --verbose              Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pytrunk import (  # noqa: E402
    ActuationOutcome,
    ActuatorDescriptor,
    BinaryState,
    LockCharacteristic,
    StateUpdate,
    TeslaClient,
    TrunkConfig,
    TrunkError,
    build_trunk_services,
)

_API_NAMES = ("front", "rear")


def _print_update(characteristic: LockCharacteristic, state: BinaryState, update: StateUpdate) -> None:
    print(f"  pushed {characteristic}={state.name} ({update.origin})")


def _print_outcome(descriptor: ActuatorDescriptor, outcome: ActuationOutcome) -> None:
    print(f"  {descriptor.name}: actuation {outcome}")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Read or drive vehicle trunks")
    parser.add_argument("--vin", help="Vehicle VIN (default: first vehicle)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--open", choices=_API_NAMES, help="Request this trunk open")
    group.add_argument("--close", choices=_API_NAMES, help="Request this trunk closed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides = {"vin": args.vin} if args.vin else {}
    try:
        config = TrunkConfig.from_env(**overrides)
    except TrunkError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    async with TeslaClient(config) as client:
        services = build_trunk_services(client, config, on_actuation=_print_outcome)

        for service in services:
            current = await service.handle_get(LockCharacteristic.CURRENT)
            print(f"{service.service_name}: {current.name}")

        api_name = args.open or args.close
        if api_name is None:
            return 0

        service = next(s for s in services if s.coordinator.descriptor.api_name == api_name)
        target = BinaryState.UNSECURED if args.open else BinaryState.SECURED
        service.subscribe(_print_update)
        print(f"{service.service_name}: requesting {target.name}")
        await service.handle_set(LockCharacteristic.TARGET, target)
        await service.coordinator.drain()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
