"""Unit tests for provider selection."""

import pytest

from curbside.config import DatabaseSettings, Settings
from curbside.domain.repository import UserRepository
from curbside.persistence.repository.inmemory import InMemoryUserRepository
from curbside.util.clock import Clock, ManualClock, SystemClock
from curbside.util.di import (
    ClockProvider,
    InMemoryPersistenceProvider,
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from curbside.util.di.container import create_container
from tests.di import ManualClockProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        """Providers without subclasses are used directly."""
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_swappable_component_selects_by_flag(self):
        """Swappable components pick production or in-memory by flag."""
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True)
            is InMemoryPersistenceProvider
        )
        assert get_provider(ClockProvider, use_mock=True) is ManualClockProvider


class TestCreateContainer:
    """Tests for backend selection in create_container."""

    @pytest.mark.asyncio
    async def test_memory_backend_uses_in_memory_repositories(self):
        """DATABASE__BACKEND=memory wires the in-memory store."""
        container = create_container(
            Settings(database=DatabaseSettings(backend="memory"))
        )

        async with container() as request_container:
            repo = await request_container.get(UserRepository)
            clock = await request_container.get(Clock)

        assert isinstance(repo, InMemoryUserRepository)
        assert isinstance(clock, SystemClock)
        await container.close()


class TestBuildTestContainer:
    """Tests for the test container builder."""

    @pytest.mark.asyncio
    async def test_serves_the_given_manual_clock(self):
        """The clock passed in is the one services see."""
        clock = ManualClock()
        container = build_test_container(clock=clock)

        assert await container.get(Clock) is clock
        await container.close()

    def test_unknown_component_is_rejected(self):
        """Unmocking something that isn't a component is an error."""
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"mailer"})
