"""Admin session domain service."""

import secrets

import logfire

from civic.config import AuthSettings
from civic.domain.error import AdminSessionError, InvalidCredentialsError
from civic.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class AdminSessionService(Service):
    """Checks admin credentials and issues/validates session tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize admin session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def login(self, username: str, password: str) -> str:
        """Check credentials and issue a session token.

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            Signed session token

        Raises:
            InvalidCredentialsError: If the credentials do not match
        """
        with logfire.span("admin_session_service.login"):
            expected_password = self.auth_settings.admin_password.get_secret_value()
            # Compare both fields so a wrong username costs the same as a wrong password
            username_ok = secrets.compare_digest(
                username.encode(), self.auth_settings.admin_username.encode()
            )
            password_ok = secrets.compare_digest(
                password.encode(), expected_password.encode()
            )
            if not (username_ok and password_ok):
                logfire.warn("Admin login failed")
                raise InvalidCredentialsError()

            token = create_token(self.auth_settings.admin_username, self.auth_settings)
            logfire.info("Admin logged in", username=self.auth_settings.admin_username)
            return token

    def verify_token(self, token: str | None) -> TokenPayload:
        """Validate a session token.

        Args:
            token: Session token from the cookie

        Returns:
            Token payload

        Raises:
            AdminSessionError: If the token is missing, invalid or expired
        """
        if not token:
            raise AdminSessionError("Not authenticated")

        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Admin session rejected", error=str(e))
            raise AdminSessionError(str(e)) from e

    def get_admin_from_token(self, token: str | None) -> str | None:
        """Return the admin username for a valid token, None otherwise."""
        try:
            return self.verify_token(token).sub
        except AdminSessionError:
            return None
