"""Unit tests for domain value objects."""

import pytest
from pydantic import ValidationError

from civic.domain.service import IdentityService
from civic.domain.value import UserToken


class TestUserToken:
    """Tests for UserToken validation."""

    @pytest.mark.parametrize(
        "raw", ["abcdefgh", "A1_b2-C3", "x" * 128, "minted-9f2c1e7a"]
    )
    def test_accepts_url_safe_tokens(self, raw):
        assert UserToken(raw).root == raw

    @pytest.mark.parametrize(
        "raw",
        [
            "abcdefgh\n",
            "\nabcdefgh",
            "short",
            "x" * 129,
            "has space1",
            "semi;colon",
        ],
    )
    def test_rejects_malformed_tokens(self, raw):
        """Trailing newlines are rejected like any other stray character."""
        with pytest.raises(ValidationError):
            UserToken(raw)

    def test_newline_token_is_ignored_by_identity_service(self):
        assert IdentityService().parse_user_token("abcdefgh\n") is None
