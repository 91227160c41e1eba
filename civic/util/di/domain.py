"""Domain layer DI providers."""

from dishka import Scope, provide

from civic.config import AuthSettings, GeoFenceSettings
from civic.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    TopicRepository,
    VoteRepository,
)
from civic.domain.service import (
    AdminSessionService,
    AuditService,
    CommentService,
    GeoFenceService,
    GeolocationClient,
    IdentityService,
    TopicService,
    VoteService,
)
from civic.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_vote_service(
        self, vote_repository: VoteRepository, topic_service: TopicService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository, topic_service=topic_service)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, topic_service: TopicService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, topic_service=topic_service
        )

    @provide
    def get_audit_service(
        self, admin_action_repository: AdminActionRepository
    ) -> AuditService:
        """Provide audit log domain service."""
        return AuditService(admin_action_repository=admin_action_repository)

    @provide
    def get_geofence_service(
        self, settings: GeoFenceSettings, geolocation_client: GeolocationClient
    ) -> GeoFenceService:
        """Provide geo-fence domain service."""
        return GeoFenceService(settings=settings, geolocation_client=geolocation_client)

    @provide
    def get_admin_session_service(
        self, auth_settings: AuthSettings
    ) -> AdminSessionService:
        """Provide admin session domain service."""
        return AdminSessionService(auth_settings=auth_settings)

    @provide
    def get_identity_service(self) -> IdentityService:
        """Provide user token service."""
        return IdentityService()
