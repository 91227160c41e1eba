"""Mock persistence providers for testing."""

from dishka import Scope, provide

from civic.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    TopicRepository,
    VoteRepository,
)
from civic.persistence.repository.inmemory import (
    InMemoryAdminActionRepository,
    InMemoryCommentRepository,
    InMemoryTopicRepository,
    InMemoryVoteRepository,
)
from civic.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one test client;
    each test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_topic_repository(self) -> TopicRepository:
        """Provide in-memory topic repository."""
        return InMemoryTopicRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_admin_action_repository(self) -> AdminActionRepository:
        """Provide in-memory admin audit log repository."""
        return InMemoryAdminActionRepository()
