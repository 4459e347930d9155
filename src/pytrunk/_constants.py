"""Internal constants shared across the library."""

USER_AGENT = "pytrunk"

# ------------------------------------------------------------------
# Owner API endpoints
# ------------------------------------------------------------------

VEHICLES_ENDPOINT = "/api/1/vehicles"


def vehicle_endpoint(vehicle_id: int) -> str:
    return f"{VEHICLES_ENDPOINT}/{vehicle_id}"


def wake_up_endpoint(vehicle_id: int) -> str:
    return f"{VEHICLES_ENDPOINT}/{vehicle_id}/wake_up"


def vehicle_data_endpoint(vehicle_id: int) -> str:
    return f"{VEHICLES_ENDPOINT}/{vehicle_id}/vehicle_data"


def command_endpoint(vehicle_id: int, command: str) -> str:
    return f"{VEHICLES_ENDPOINT}/{vehicle_id}/command/{command}"
