"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from curbside.config import Settings
from curbside.domain.repository import (
    CommentRepository,
    ImageRepository,
    ItemRepository,
    KudosRepository,
    PostRepository,
    UserRepository,
)
from curbside.persistence.database import create_engine, create_session_factory
from curbside.persistence.repository import (
    PostgresCommentRepository,
    PostgresImageRepository,
    PostgresItemRepository,
    PostgresKudosRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from curbside.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryImageRepository,
    InMemoryItemRepository,
    InMemoryKudosRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from curbside.util.di.base import ProviderBase
from curbside.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one did. The container sends the
        request's exception (or None) back into this generator on close.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is None:
                await session.commit()
                logfire.debug("Session committed")
            else:
                logfire.warn("Session rollback", error=str(exc))
                await session.rollback()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_item_repository(self, session: AsyncSession) -> ItemRepository:
        """Provide Item repository."""
        return PostgresItemRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_image_repository(self, session: AsyncSession) -> ImageRepository:
        """Provide Image repository."""
        return PostgresImageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_kudos_repository(self, session: AsyncSession) -> KudosRepository:
        """Provide Kudos repository."""
        return PostgresKudosRepository(session)


class InMemoryPersistenceProvider(PersistenceProvider):
    """Process-local persistence provider.

    One InMemoryStore lives for the lifetime of the container, so data is
    shared across requests (and lost on restart). Selected with
    DATABASE__BACKEND=memory and used by the test suite.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_item_repository(self, store: InMemoryStore) -> ItemRepository:
        """Provide in-memory item repository."""
        return InMemoryItemRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_image_repository(self, store: InMemoryStore) -> ImageRepository:
        """Provide in-memory image repository."""
        return InMemoryImageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_kudos_repository(self, store: InMemoryStore) -> KudosRepository:
        """Provide in-memory kudos repository."""
        return InMemoryKudosRepository(store)
