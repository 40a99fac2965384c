"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from empire.interface.api.app import create_app
from empire.util.di import Component
from tests.di import MockPersistenceProvider, build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_comment(unit_env):
            service = await unit_env.get(CommentService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for an API client fixture over in-memory persistence.

    The fixture yields ``(client, persistence)``; ``persistence`` is the
    mock provider whose repositories back every request of the client.
    """

    @pytest.fixture
    def _api():
        persistence = MockPersistenceProvider()
        container = build_test_container(instances={"persistence": persistence})
        with TestClient(create_app(container)) as client:
            yield client, persistence

    return _api
