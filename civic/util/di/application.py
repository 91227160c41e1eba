"""Application layer DI providers."""

from dishka import Scope, provide

from civic.application.usecase.admin import (
    AdminLoginUseCase,
    CreateTopicUseCase,
    DeleteCommentUseCase,
    DeleteTopicUseCase,
    ReconcileTallyUseCase,
)
from civic.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from civic.application.usecase.identity import GetIdentityUseCase
from civic.application.usecase.location import CheckLocationUseCase
from civic.application.usecase.topic import GetTopicUseCase, ListTopicsUseCase
from civic.application.usecase.vote import CastVoteUseCase, ClearVoteUseCase
from civic.config import AuthSettings
from civic.domain.service import (
    AdminSessionService,
    AuditService,
    CommentService,
    GeoFenceService,
    IdentityService,
    TopicService,
    VoteService,
)
from civic.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(
            topic_service=topic_service,
            vote_service=vote_service,
            identity_service=identity_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_topic_use_case(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(
            topic_service=topic_service,
            vote_service=vote_service,
            identity_service=identity_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_clear_vote_use_case(self, vote_service: VoteService) -> ClearVoteUseCase:
        """Provide clear vote use case."""
        return ClearVoteUseCase(vote_service=vote_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_admin_login_use_case(
        self, admin_session_service: AdminSessionService, auth_settings: AuthSettings
    ) -> AdminLoginUseCase:
        """Provide admin login use case."""
        return AdminLoginUseCase(
            admin_session_service=admin_session_service, auth_settings=auth_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self, topic_service: TopicService, audit_service: AuditService
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            topic_service=topic_service, audit_service=audit_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_topic_use_case(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        comment_service: CommentService,
        audit_service: AuditService,
    ) -> DeleteTopicUseCase:
        """Provide delete topic use case."""
        return DeleteTopicUseCase(
            topic_service=topic_service,
            vote_service=vote_service,
            comment_service=comment_service,
            audit_service=audit_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, audit_service: AuditService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, audit_service=audit_service
        )

    @provide(scope=Scope.REQUEST)
    def get_reconcile_tally_use_case(
        self, vote_service: VoteService
    ) -> ReconcileTallyUseCase:
        """Provide reconcile tally use case."""
        return ReconcileTallyUseCase(vote_service=vote_service)

    # Location and identity use cases
    @provide(scope=Scope.REQUEST)
    def get_check_location_use_case(
        self, geofence_service: GeoFenceService
    ) -> CheckLocationUseCase:
        """Provide check location use case."""
        return CheckLocationUseCase(geofence_service=geofence_service)

    @provide(scope=Scope.REQUEST)
    def get_get_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetIdentityUseCase:
        """Provide get identity use case."""
        return GetIdentityUseCase(identity_service=identity_service)
