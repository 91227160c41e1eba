"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from civic.config import Settings
from civic.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    TopicRepository,
    VoteRepository,
)
from civic.persistence.database import create_engine, create_session_factory
from civic.persistence.repository import (
    PostgresAdminActionRepository,
    PostgresCommentRepository,
    PostgresTopicRepository,
    PostgresVoteRepository,
)
from civic.util.di.base import ProviderBase
from civic.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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
        occurred, or rolled back if one was raised. The vote row and the
        counter adjustment therefore land together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise
            else:
                await session.commit()
                logfire.info("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_admin_action_repository(
        self, session: AsyncSession
    ) -> AdminActionRepository:
        """Provide admin audit log repository."""
        return PostgresAdminActionRepository(session)
