"""Tests for the session cookie codec."""
import pytest

from app.core.config import MAX_DB_INT, Settings
from app.core.security import decode_session_token, issue_session_token, session_cookie_options


class TestSessionToken:
    """Tests for issue/decode of the identity cookie value."""

    def test_issue_is_deterministic(self):
        assert issue_session_token(42) == issue_session_token(42) == "42"

    def test_decode_reverses_issue(self):
        assert decode_session_token(issue_session_token(1)) == 1

    @pytest.mark.parametrize(
        "token", [None, "", "abc", "-1", "1.5", "12a", "²", " ", "9" * 30, "1" * 5000]
    )
    def test_malformed_is_anonymous(self, token):
        assert decode_session_token(token) is None

    def test_surrounding_whitespace_ignored(self):
        assert decode_session_token(" 7 ") == 7

    def test_largest_database_id(self):
        assert decode_session_token(str(MAX_DB_INT)) == MAX_DB_INT
        assert decode_session_token(str(MAX_DB_INT + 1)) is None

    def test_negative_id_rejected(self):
        with pytest.raises(ValueError):
            issue_session_token(-1)


class TestCookieOptions:
    """Tests for the identity cookie attributes."""

    def test_defaults(self):
        options = session_cookie_options(Settings())

        assert options["key"] == "user_id"
        assert options["secure"] is False
        assert options["httponly"] is True
        assert options["path"] == "/"
        assert "max_age" not in options

    def test_max_age_when_configured(self):
        options = session_cookie_options(Settings(user_cookie_max_age=3600, user_cookie_secure=True))

        assert options["max_age"] == 3600
        assert options["secure"] is True
