"""Admin routes.

Every route except login/logout/session requires a valid ``admin_token``
cookie, checked server-side on each request.
"""

import logging
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel, Field

from civic.application.usecase.admin import (
    AdminLoginRequest,
    AdminLoginUseCase,
    CreateTopicRequest,
    CreateTopicUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    DeleteTopicRequest,
    DeleteTopicResponse,
    DeleteTopicUseCase,
    ReconcileTallyRequest,
    ReconcileTallyResponse,
    ReconcileTallyUseCase,
)
from civic.application.usecase.topic import TopicItem
from civic.config import Settings
from civic.domain.error import (
    AdminSessionError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from civic.domain.service import AdminSessionService
from civic.interface.api.cookies import clear_admin_cookie, set_admin_cookie

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class AdminLoginAPIRequest(BaseModel):
    """API request for admin login."""

    username: str = Field(max_length=200)
    password: str = Field(max_length=200)


class AdminSessionResponse(BaseModel):
    """Admin session status."""

    authenticated: bool
    username: str | None = None


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    title: str = Field(max_length=300)
    description: str = Field(max_length=5000)
    external_link: str | None = Field(default=None, max_length=2000)


def _require_admin(
    admin_session_service: AdminSessionService, admin_token: str | None
) -> str:
    """Validate the session cookie, returning the admin username.

    Raises:
        HTTPException: 401 if missing, invalid or expired
    """
    try:
        return admin_session_service.verify_token(admin_token).sub
    except AdminSessionError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.post("/login", response_model=AdminSessionResponse)
async def admin_login(
    request: AdminLoginAPIRequest,
    response: Response,
    admin_login_use_case: FromDishka[AdminLoginUseCase],
    settings: FromDishka[Settings],
) -> AdminSessionResponse:
    """Open an admin session.

    Sets an HttpOnly ``admin_token`` cookie holding a signed, expiring token.

    Raises:
        HTTPException: If credentials do not match
    """
    try:
        result = await admin_login_use_case.execute(
            AdminLoginRequest(username=request.username, password=request.password)
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    set_admin_cookie(response, result.token, result.max_age_seconds, settings)
    logger.info(f"Admin session opened for {result.username}")
    return AdminSessionResponse(authenticated=True, username=result.username)


@router.post("/logout", response_model=AdminSessionResponse)
async def admin_logout(
    response: Response,
    settings: FromDishka[Settings],
) -> AdminSessionResponse:
    """Close the admin session by clearing its cookie."""
    clear_admin_cookie(response, settings)
    return AdminSessionResponse(authenticated=False)


@router.get("/session", response_model=AdminSessionResponse)
async def admin_session(
    admin_session_service: FromDishka[AdminSessionService],
    admin_token: str | None = Cookie(default=None),
) -> AdminSessionResponse:
    """Report whether the caller holds a valid admin session."""
    username = admin_session_service.get_admin_from_token(admin_token)
    return AdminSessionResponse(authenticated=username is not None, username=username)


@router.post(
    "/topics", response_model=TopicItem, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    request: CreateTopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    admin_session_service: FromDishka[AdminSessionService],
    admin_token: str | None = Cookie(default=None),
) -> TopicItem:
    """Create a topic and record it in the audit log.

    Raises:
        HTTPException: If not an admin, or title/description is blank
    """
    _require_admin(admin_session_service, admin_token)

    try:
        return await create_topic_use_case.execute(
            CreateTopicRequest(
                title=request.title,
                description=request.description,
                external_link=request.external_link,
            )
        )
    except ValidationError as e:
        logfire.warn("Topic creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/topics/{topic_id}", response_model=DeleteTopicResponse)
async def delete_topic(
    topic_id: UUID,
    delete_topic_use_case: FromDishka[DeleteTopicUseCase],
    admin_session_service: FromDishka[AdminSessionService],
    admin_token: str | None = Cookie(default=None),
) -> DeleteTopicResponse:
    """Delete a topic together with its votes and comments.

    Raises:
        HTTPException: If not an admin, or topic not found
    """
    _require_admin(admin_session_service, admin_token)

    try:
        return await delete_topic_use_case.execute(DeleteTopicRequest(topic_id=topic_id))
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post("/topics/{topic_id}/reconcile", response_model=ReconcileTallyResponse)
async def reconcile_tally(
    topic_id: UUID,
    reconcile_tally_use_case: FromDishka[ReconcileTallyUseCase],
    admin_session_service: FromDishka[AdminSessionService],
    admin_token: str | None = Cookie(default=None),
) -> ReconcileTallyResponse:
    """Recompute a topic's counters from its vote rows.

    Raises:
        HTTPException: If not an admin, or topic not found
    """
    _require_admin(admin_session_service, admin_token)

    try:
        return await reconcile_tally_use_case.execute(
            ReconcileTallyRequest(topic_id=topic_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    admin_session_service: FromDishka[AdminSessionService],
    admin_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Permanently delete a comment and record it in the audit log.

    Raises:
        HTTPException: If not an admin, or comment not found
    """
    _require_admin(admin_session_service, admin_token)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
