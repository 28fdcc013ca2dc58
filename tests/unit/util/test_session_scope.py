"""Unit tests for the request-scoped database session."""

import pytest
from dishka import Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from curbside.util.di import ProdConfigProvider, ProdPersistenceProvider


class RecordingSession:
    """Stands in for AsyncSession and records how the request ended."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.calls.append("close")

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")


class RecordingPersistenceProvider(ProdPersistenceProvider):
    """Production persistence wiring over a recording session."""

    def __init__(self, session: RecordingSession) -> None:
        super().__init__()
        self.session = session

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: self.session


@pytest.fixture
def session():
    return RecordingSession()


@pytest.fixture
def container(session):
    return make_async_container(
        ProdConfigProvider(), RecordingPersistenceProvider(session)
    )


class TestRequestSession:
    """Commit or rollback at the end of the request scope."""

    @pytest.mark.asyncio
    async def test_successful_request_commits(self, container, session):
        """A request that completes commits its writes."""
        async with container() as request_container:
            await request_container.get(AsyncSession)

        assert session.calls == ["commit", "close"]
        await container.close()

    @pytest.mark.asyncio
    async def test_failed_request_rolls_back(self, container, session):
        """A request that raises rolls back instead of committing."""
        with pytest.raises(ValueError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise ValueError("use case failed")

        assert session.calls == ["rollback", "close"]
        await container.close()
