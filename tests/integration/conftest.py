"""Integration test fixtures.

Integration tests drive the real client, driver and cleanup coordinator
against the in-memory backend, so every request crosses httpx and respx.
"""

from collections.abc import AsyncGenerator, Callable

import pytest

from tests.fixtures.titanic_backend_mock import BASE_URL, FakeTitanicBackend
from titanic_harness.cases import DEFAULT_CASES, SuiteCase
from titanic_harness.core.cleanup import CleanupCoordinator
from titanic_harness.core.driver import SuiteDriver
from titanic_harness.data.fixture_store import build_actors
from titanic_harness.services.titanic.client import TitanicApiClient


@pytest.fixture
async def titanic_client(
    mock_titanic_backend: FakeTitanicBackend,
) -> AsyncGenerator[TitanicApiClient, None]:
    """Real client routed into the fake backend."""
    async with TitanicApiClient(BASE_URL) as client:
        yield client


@pytest.fixture
def make_driver(titanic_client: TitanicApiClient) -> Callable[..., SuiteDriver]:
    """Build a driver over the routed client.

    Usage:
        driver = make_driver(suffix="1", verify=True)
        report = await driver.run()
    """

    def _build(
        suffix: str = "1700000000000",
        cases: tuple[SuiteCase, ...] = DEFAULT_CASES,
        verify: bool = False,
    ) -> SuiteDriver:
        return SuiteDriver(
            titanic_client,
            build_actors(suffix=suffix),
            cases,
            coordinator=CleanupCoordinator(titanic_client, verify=verify),
            base_url=BASE_URL,
        )

    return _build
