"""Test harness for unit and integration tests.

Unit tests run entirely in memory. Integration tests unmock persistence and
expect PostgreSQL at DATABASE__URL with migrations applied.
"""

import pytest_asyncio

from curbside.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container (new store, new clock) per test
    - Yields a request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory store, manual clock
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_add_kudos(unit_env):
            kudos_service = await unit_env.get(KudosService)
            clock = await unit_env.get(Clock)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
