"""Shared pytest fixtures for the Titanic harness tests.

This module provides fixtures for:
- A clean TITANIC_* environment and settings cache per test session
- Actors and passengers built from factories
- A fake API client (AsyncMock) for testing the engine without a backend
- The in-memory fake backend (see tests/fixtures/titanic_backend_mock.py)

Usage:
    @pytest.mark.unit
    async def test_something(fake_client, session_state):
        fake_client.delete_passenger.return_value = make_response(204)
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock

import pytest

from tests.factories.passenger import PassengerFactory
from tests.fixtures.titanic_backend_mock import (  # noqa: F401
    mock_titanic_backend,
    titanic_backend,
)
from tests.support.responses import make_response
from titanic_harness.config.settings import get_settings
from titanic_harness.core.session import SessionState
from titanic_harness.data.fixture_store import build_actors
from titanic_harness.models.actor import ActorPair
from titanic_harness.services.titanic.client import TitanicApiClient

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env first, then sets defaults for anything missing.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    # Won't override variables that are already set
    load_dotenv()

    os.environ.setdefault("TITANIC_BASE_URL", "http://localhost:8000")
    os.environ.setdefault("TITANIC_LOG_LEVEL", "DEBUG")

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """get_settings() is lru_cached; drop it around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def passenger_factory() -> type[PassengerFactory]:
    """Provide passenger factory for creating test passengers."""
    return PassengerFactory


@pytest.fixture
def actors() -> ActorPair:
    """Admin and regular actor with a fixed suffix."""
    return build_actors(suffix="1700000000000")


@pytest.fixture
def session_state() -> SessionState:
    """Fresh run-scoped session state."""
    return SessionState(run_id="test-run")


# =============================================================================
# Fake API Client
# =============================================================================


@pytest.fixture
def fake_client() -> AsyncMock:
    """AsyncMock standing in for TitanicApiClient.

    Defaults describe a healthy backend: health ok, actors created and
    logged in, passengers created with id 1, deletes accepted and
    read-backs returning 404.
    """
    client = AsyncMock(spec=TitanicApiClient)
    client.check_health.return_value = make_response(200, {"gateway": "ok"}, "GET", "/health")
    client.register.return_value = make_response(201, {}, "POST", "/api/auth/register")
    client.login.return_value = make_response(
        200, {"access_token": "token"}, "POST", "/api/auth/login"
    )
    client.create_passenger.return_value = make_response(
        201, {"id": 1}, "POST", "/api/passengers"
    )
    client.get_passenger.return_value = make_response(404, {"detail": "Not found"})
    client.delete_passenger.return_value = make_response(204, None, "DELETE")
    return client
