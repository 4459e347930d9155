"""Async client for the vehicle owner API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from pytrunk._constants import (
    VEHICLES_ENDPOINT,
    command_endpoint,
    vehicle_data_endpoint,
    vehicle_endpoint,
    wake_up_endpoint,
)
from pytrunk._transport import HttpTransport, Transport
from pytrunk.config import TrunkConfig
from pytrunk.exceptions import (
    TrunkApiError,
    TrunkCommandError,
    TrunkError,
    TrunkVehicleAsleepError,
    TrunkVehicleUnavailableError,
)
from pytrunk.models.command import CommandResult, TrunkCommand
from pytrunk.models.telemetry import VehicleTelemetry
from pytrunk.models.vehicle import OnlineState, Vehicle
from pytrunk.session import SessionOptions

_logger = logging.getLogger(__name__)


class TeslaClient:
    """Owner API client implementing :class:`pytrunk.device.DeviceApi`.

    Usage::

        async with TeslaClient(config) as client:
            options = await client.fetch_options()
            await client.wake_up(options)
    """

    def __init__(
        self,
        config: TrunkConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> TeslaClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise TrunkError("Client not initialized. Use 'async with TeslaClient(...) as client:'")
        return self._transport

    async def _get(self, endpoint: str, *, access_token: str | None = None) -> Any:
        return await self._require_transport().request(
            "GET",
            endpoint,
            access_token=access_token or self._config.access_token,
        )

    async def _post(
        self,
        endpoint: str,
        payload: dict[str, Any] | None = None,
        *,
        access_token: str | None = None,
    ) -> Any:
        return await self._require_transport().request(
            "POST",
            endpoint,
            access_token=access_token or self._config.access_token,
            payload=payload,
        )

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    async def get_vehicles(self) -> list[Vehicle]:
        """Fetch all vehicles on the account."""
        decoded = await self._get(VEHICLES_ENDPOINT)
        items = decoded if isinstance(decoded, list) else []
        return [Vehicle.model_validate(item) for item in items]

    async def get_vehicle(self, vehicle_id: int) -> Vehicle:
        decoded = await self._get(vehicle_endpoint(vehicle_id))
        return Vehicle.model_validate(decoded)

    async def fetch_options(self) -> SessionOptions:
        """Resolve the configured vehicle into :class:`SessionOptions`.

        Raises
        ------
        TrunkApiError
            When the account has no vehicles or the configured VIN is not
            among them.
        """
        vehicles = await self.get_vehicles()
        if not vehicles:
            raise TrunkApiError("No vehicles found on this account", endpoint=VEHICLES_ENDPOINT)

        wanted = self._config.vin
        if wanted:
            matches = [v for v in vehicles if v.vin.upper() == wanted.strip().upper()]
            if not matches:
                raise TrunkApiError(f"Vehicle {wanted} not found on this account", endpoint=VEHICLES_ENDPOINT)
            vehicle = matches[0]
        else:
            vehicle = vehicles[0]

        return SessionOptions(
            access_token=self._config.access_token,
            vehicle_id=vehicle.id,
            vin=vehicle.vin,
            state=vehicle.state,
        )

    # ------------------------------------------------------------------
    # Wake
    # ------------------------------------------------------------------

    async def wake_up(self, options: SessionOptions) -> None:
        """Wake the vehicle and poll until it reports ``online``.

        Raises
        ------
        TrunkVehicleAsleepError
            When the vehicle is still not online after
            ``config.wake_poll_attempts`` polls.
        """
        endpoint = wake_up_endpoint(options.vehicle_id)
        decoded = await self._post(endpoint, access_token=options.access_token)
        if Vehicle.model_validate(decoded).is_online:
            return

        for attempt in range(1, self._config.wake_poll_attempts + 1):
            await asyncio.sleep(self._config.wake_poll_interval)
            try:
                vehicle = await self.get_vehicle(options.vehicle_id)
            except TrunkVehicleUnavailableError:
                _logger.debug("Wake poll attempt=%d: vehicle unavailable", attempt)
                continue
            _logger.debug("Wake poll attempt=%d state=%s", attempt, vehicle.state)
            if vehicle.is_online:
                return

        raise TrunkVehicleAsleepError(
            f"Vehicle {options.vin or options.vehicle_id} did not wake up "
            f"after {self._config.wake_poll_attempts} attempts",
            endpoint=endpoint,
        )

    # ------------------------------------------------------------------
    # Telemetry
    # ------------------------------------------------------------------

    async def fetch_vehicle_telemetry(self) -> VehicleTelemetry | None:
        """Return ``vehicle_data`` for the configured vehicle.

        Returns ``None`` without waking the car when it is not online, or
        when the API reports it unavailable.
        """
        options = await self.fetch_options()
        if options.state is not OnlineState.ONLINE:
            _logger.debug("Vehicle %s is %s; no telemetry", options.vin, options.state)
            return None
        try:
            decoded = await self._get(vehicle_data_endpoint(options.vehicle_id))
        except TrunkVehicleUnavailableError:
            _logger.debug("Vehicle %s became unavailable; no telemetry", options.vin)
            return None
        return VehicleTelemetry.model_validate(decoded)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def issue_command(
        self,
        command: TrunkCommand,
        options: SessionOptions,
        api_name: str,
    ) -> None:
        """Send *command* for the trunk named *api_name*.

        Raises
        ------
        TrunkCommandError
            When the vehicle answers ``result: false``.
        """
        endpoint = command_endpoint(options.vehicle_id, str(command))
        decoded = await self._post(endpoint, {"which_trunk": api_name}, access_token=options.access_token)
        result = CommandResult.model_validate(decoded if isinstance(decoded, dict) else {})
        if not result.result:
            raise TrunkCommandError(
                f"{command} rejected: {result.reason or 'no reason given'}",
                reason=result.reason,
                endpoint=endpoint,
            )
