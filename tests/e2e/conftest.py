"""Live E2E fixtures for a running Titanic gateway.

This module provides fixtures for:
- Skipping the whole e2e session when the gateway is not reachable
- One provisioned suite driver shared by every e2e test (setup runs once)

Target selection follows the harness settings (TITANIC_BASE_URL etc.).

Usage:
    TITANIC_BASE_URL=http://localhost:8000 pytest -m e2e
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from titanic_harness.cases import DEFAULT_CASES
from titanic_harness.config.settings import Settings
from titanic_harness.core.cleanup import CleanupCoordinator
from titanic_harness.core.driver import SuiteDriver
from titanic_harness.data.fixture_store import build_actors
from titanic_harness.services.titanic.client import TitanicApiClient

# Seconds to wait for the reachability probe
PROBE_TIMEOUT = 3.0


@pytest.fixture(scope="session")
def live_settings() -> Settings:
    """Harness settings, or skip when the gateway does not answer."""
    settings = Settings()
    try:
        httpx.get(f"{settings.base_url}/health", timeout=PROBE_TIMEOUT)
    except httpx.HTTPError as e:
        pytest.skip(f"Titanic gateway not reachable at {settings.base_url}: {e}")
    return settings


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def live_driver(live_settings: Settings) -> AsyncGenerator[SuiteDriver, None]:
    """Driver with both actors provisioned against the live gateway.

    Cleanup read-back is always on so leftovers fail loudly.
    """
    actors = build_actors(
        suffix=live_settings.run_suffix,
        password=live_settings.actor_password,
        admin_email=live_settings.admin_email,
        regular_email=live_settings.regular_email,
    )
    async with TitanicApiClient(
        live_settings.base_url, timeout=live_settings.request_timeout
    ) as client:
        driver = SuiteDriver(
            client,
            actors,
            DEFAULT_CASES,
            coordinator=CleanupCoordinator(client, verify=True),
            base_url=live_settings.base_url,
        )
        await driver.setup()
        yield driver
