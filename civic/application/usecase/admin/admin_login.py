"""Admin login use case."""

from pydantic import BaseModel

from civic.config import AuthSettings
from civic.domain.service import AdminSessionService

from civic.application.usecase.base import BaseUseCase


class AdminLoginRequest(BaseModel):
    """Admin login request."""

    username: str
    password: str


class AdminLoginResponse(BaseModel):
    """Admin login response.

    The route sets ``token`` as a cookie and does not expose it in the
    response body.
    """

    username: str
    token: str
    max_age_seconds: int


class AdminLoginUseCase(BaseUseCase):
    """Use case for opening an admin session."""

    def __init__(
        self, admin_session_service: AdminSessionService, auth_settings: AuthSettings
    ) -> None:
        """Initialize admin login use case.

        Args:
            admin_session_service: Admin session domain service
            auth_settings: Authentication settings
        """
        self.admin_session_service = admin_session_service
        self.auth_settings = auth_settings

    async def execute(self, request: AdminLoginRequest) -> AdminLoginResponse:
        """Execute admin login flow.

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        token = self.admin_session_service.login(request.username, request.password)
        return AdminLoginResponse(
            username=self.auth_settings.admin_username,
            token=token,
            max_age_seconds=self.auth_settings.jwt_expiry_hours * 3600,
        )
