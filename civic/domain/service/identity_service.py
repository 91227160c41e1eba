"""Anonymous user token service."""

import secrets

import logfire
from pydantic import ValidationError as PydanticValidationError

from civic.domain.value import UserToken

from .base import Service


class IdentityService(Service):
    """Mints and validates per-browser user tokens.

    The token only keys one-vote-per-user; it authorizes nothing.
    """

    def mint_user_token(self) -> UserToken:
        """Generate a fresh URL-safe token."""
        token = UserToken(secrets.token_urlsafe(24))
        logfire.info("User token minted")
        return token

    def parse_user_token(self, raw: str | None) -> UserToken | None:
        """Validate a token presented by the client.

        Args:
            raw: Cookie value, possibly missing

        Returns:
            The token, or None if it is missing or malformed
        """
        if not raw:
            return None
        try:
            return UserToken(raw)
        except PydanticValidationError:
            logfire.debug("Malformed user token ignored")
            return None

    def resolve_user_token(self, raw: str | None) -> tuple[UserToken, bool]:
        """Return the presented token, minting one if needed.

        Returns:
            The token and whether it was newly minted
        """
        token = self.parse_user_token(raw)
        if token is not None:
            return token, False
        return self.mint_user_token(), True
