"""Unit tests for AdminSessionService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from pydantic import SecretStr

from civic.config import AuthSettings
from civic.domain.error import AdminSessionError, InvalidCredentialsError
from civic.domain.service import AdminSessionService

SETTINGS = AuthSettings(
    admin_username="prefeitura",
    admin_password=SecretStr("s3nha-forte"),
    jwt_secret="unit-test-secret-that-is-long-enough",
)


@pytest.fixture
def service() -> AdminSessionService:
    return AdminSessionService(SETTINGS)


class TestLogin:
    """Tests for login method."""

    def test_valid_credentials_issue_token(self, service):
        token = service.login("prefeitura", "s3nha-forte")

        payload = service.verify_token(token)
        assert payload.sub == "prefeitura"
        assert payload.exp - payload.iat == timedelta(hours=12)

    @pytest.mark.parametrize(
        "username,password",
        [
            ("prefeitura", "wrong"),
            ("someone", "s3nha-forte"),
            ("", ""),
        ],
    )
    def test_bad_credentials_are_rejected(self, service, username, password):
        with pytest.raises(InvalidCredentialsError):
            service.login(username, password)


class TestVerifyToken:
    """Tests for verify_token and get_admin_from_token."""

    def test_missing_token(self, service):
        with pytest.raises(AdminSessionError, match="Not authenticated"):
            service.verify_token(None)

    def test_token_signed_with_other_secret_is_rejected(self, service):
        forged = jwt.encode(
            {
                "sub": "prefeitura",
                "role": "admin",
                "iat": datetime.now(timezone.utc),
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            "some-other-secret-of-sufficient-length",
            algorithm="HS256",
        )

        with pytest.raises(AdminSessionError, match="Invalid token"):
            service.verify_token(forged)
        assert service.get_admin_from_token(forged) is None

    def test_expired_token_is_rejected(self, service):
        issued = datetime.now(timezone.utc) - timedelta(hours=13)
        expired = jwt.encode(
            {
                "sub": "prefeitura",
                "role": "admin",
                "iat": issued,
                "exp": issued + timedelta(hours=12),
            },
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(AdminSessionError, match="expired"):
            service.verify_token(expired)

    def test_token_without_admin_role_is_rejected(self, service):
        token = jwt.encode(
            {
                "sub": "prefeitura",
                "iat": datetime.now(timezone.utc),
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            SETTINGS.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(AdminSessionError, match="admin access"):
            service.verify_token(token)

    def test_garbage_token(self, service):
        assert service.get_admin_from_token("not-a-jwt") is None
