"""Domain services."""

from .admin_session_service import AdminSessionService
from .audit_service import AuditService
from .base import Service
from .comment_service import CommentService
from .geofence_service import (
    GeoFenceResult,
    GeoFenceService,
    GeolocationClient,
    haversine_distance_km,
)
from .identity_service import IdentityService
from .topic_service import TopicService
from .vote_service import VoteOutcome, VoteService, plan_click, plan_transition

__all__ = [
    "AdminSessionService",
    "AuditService",
    "CommentService",
    "GeoFenceResult",
    "GeoFenceService",
    "GeolocationClient",
    "IdentityService",
    "Service",
    "TopicService",
    "VoteOutcome",
    "VoteService",
    "haversine_distance_km",
    "plan_click",
    "plan_transition",
]
