"""JWT token utilities for admin sessions."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from civic.config import AuthSettings

ADMIN_ROLE = "admin"


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str
    role: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(username: str, settings: AuthSettings) -> str:
    """Create a signed admin session token.

    Args:
        username: Admin username
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expiry = issued_at + timedelta(hours=settings.jwt_expiry_hours)

    payload = {
        "sub": username,
        "role": ADMIN_ROLE,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an admin session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or not an admin token
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    if payload.get("role") != ADMIN_ROLE:
        raise JWTError("Token does not grant admin access")

    return TokenPayload(**payload)
