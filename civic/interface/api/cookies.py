"""Cookie helpers shared by routes.

Production (cross-site frontend): samesite="none" with secure=True.
Development (same-origin localhost): samesite="lax", secure=False.
"""

from fastapi import Response

from civic.config import Settings

USER_TOKEN_COOKIE = "user_id"
ADMIN_TOKEN_COOKIE = "admin_token"


def _samesite(settings: Settings) -> str:
    return "none" if settings.secure_cookies else "lax"


def set_user_token_cookie(response: Response, token: str, settings: Settings) -> None:
    """Persist the anonymous user token in the browser."""
    response.set_cookie(
        key=USER_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=_samesite(settings),  # type: ignore[arg-type]
        path="/",
        max_age=settings.auth.user_token_max_age_days * 24 * 60 * 60,
    )


def set_admin_cookie(
    response: Response, token: str, max_age: int, settings: Settings
) -> None:
    """Set the admin session cookie."""
    response.set_cookie(
        key=ADMIN_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite=_samesite(settings),  # type: ignore[arg-type]
        path="/",
        max_age=max_age,
    )


def clear_admin_cookie(response: Response, settings: Settings) -> None:
    """Remove the admin session cookie."""
    response.delete_cookie(
        key=ADMIN_TOKEN_COOKIE,
        path="/",
        secure=settings.secure_cookies,
        httponly=True,
        samesite=_samesite(settings),  # type: ignore[arg-type]
    )
