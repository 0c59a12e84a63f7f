"""Titanic backend API client.

One method per remote capability. Every method returns the raw
httpx.Response so that cases can assert on status and body; the parsing
helpers at the bottom pull out the few values the harness needs.
"""

from typing import Protocol

import httpx
import structlog

from titanic_harness.models.actor import Actor
from titanic_harness.models.passenger import Passenger
from titanic_harness.services.base import BaseAPIClient

log = structlog.get_logger(__name__)

HEALTH_PATH = "/health"
REGISTER_PATH = "/api/auth/register"
LOGIN_PATH = "/api/auth/login"
PASSENGERS_PATH = "/api/passengers"


class TitanicApi(Protocol):
    """Operations the driver and the cleanup coordinator depend on."""

    async def check_health(self) -> httpx.Response: ...

    async def register(
        self, actor: Actor, fail_on_status: bool = True
    ) -> httpx.Response: ...

    async def login(self, actor: Actor, fail_on_status: bool = True) -> httpx.Response: ...

    async def create_passenger(
        self, passenger: Passenger, token: str, fail_on_status: bool = True
    ) -> httpx.Response: ...

    async def get_passenger(
        self, passenger_id: int, token: str, fail_on_status: bool = True
    ) -> httpx.Response: ...

    async def delete_passenger(
        self, passenger_id: int, token: str, fail_on_status: bool = True
    ) -> httpx.Response: ...


class TitanicApiClient(BaseAPIClient):
    """Async client for the Titanic gateway.

    Stateless apart from the pooled httpx client: tokens are passed to each
    call and nothing here touches the session state.

    Example:
        async with TitanicApiClient("http://localhost:8000") as client:
            response = await client.login(actor)
            token = access_token_from(response)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self) -> "TitanicApiClient":
        return self

    async def check_health(self) -> httpx.Response:
        """GET /health (no auth)."""
        return await self.request("GET", HEALTH_PATH)

    async def register(self, actor: Actor, fail_on_status: bool = True) -> httpx.Response:
        """Register an actor.

        A second registration of the same username is rejected by the
        backend; that is the backend's behaviour, not a client error.
        """
        log.info("actor_register", username=actor.username, role=actor.role.value)
        return await self.request(
            "POST",
            REGISTER_PATH,
            json=actor.registration_payload(),
            fail_on_status=fail_on_status,
        )

    async def login(self, actor: Actor, fail_on_status: bool = True) -> httpx.Response:
        """Log an actor in. Use access_token_from() on the response."""
        log.info("actor_login", username=actor.username, role=actor.role.value)
        return await self.request(
            "POST",
            LOGIN_PATH,
            json=actor.login_payload(),
            fail_on_status=fail_on_status,
        )

    async def create_passenger(
        self, passenger: Passenger, token: str, fail_on_status: bool = True
    ) -> httpx.Response:
        """POST /api/passengers with bearer auth."""
        return await self.request(
            "POST",
            PASSENGERS_PATH,
            json=passenger.to_payload(),
            token=token,
            fail_on_status=fail_on_status,
        )

    async def get_passenger(
        self, passenger_id: int, token: str, fail_on_status: bool = True
    ) -> httpx.Response:
        """GET /api/passengers/{id} with bearer auth."""
        return await self.request(
            "GET",
            f"{PASSENGERS_PATH}/{passenger_id}",
            token=token,
            fail_on_status=fail_on_status,
        )

    async def delete_passenger(
        self, passenger_id: int, token: str, fail_on_status: bool = True
    ) -> httpx.Response:
        """DELETE /api/passengers/{id}; the backend requires an admin token."""
        return await self.request(
            "DELETE",
            f"{PASSENGERS_PATH}/{passenger_id}",
            token=token,
            fail_on_status=fail_on_status,
        )


def _json_object(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def access_token_from(response: httpx.Response) -> str:
    """Bearer token from a login response, or "" when there is none."""
    if not response.is_success:
        return ""
    token = _json_object(response).get("access_token")
    return token if isinstance(token, str) else ""


def created_id_from(response: httpx.Response) -> int | None:
    """Server-assigned id from a successful create response, or None."""
    if not response.is_success:
        return None
    value = _json_object(response).get("id")
    # bool is an int subclass; a JSON true is not an id
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
