"""Session cookie codec: the cookie value is the user id in plain decimal."""
import re

from app.core.config import MAX_DB_INT, Settings

_TOKEN_RE = re.compile(r"[0-9]+")


def issue_session_token(user_id: int) -> str:
    """Encode a user id as a session token (unsigned, reversible)."""
    if user_id < 0:
        raise ValueError("user id must be non-negative")
    return str(user_id)


def decode_session_token(token: str | None) -> int | None:
    """Return the user id carried by token, or None if absent/malformed."""
    if not token:
        return None
    token = token.strip()
    # str.isdigit() also accepts things like "²"; only ASCII digits are valid
    if len(token) > len(str(MAX_DB_INT)) or not _TOKEN_RE.fullmatch(token):
        return None
    user_id = int(token)
    if user_id > MAX_DB_INT:
        return None
    return user_id


def session_cookie_options(settings: Settings) -> dict:
    """Keyword arguments for Response.set_cookie() for the identity cookie."""
    options = {
        "key": settings.user_cookie_name,
        "httponly": True,
        "samesite": "lax",
        "secure": settings.user_cookie_secure,
        "path": "/",
    }
    if settings.user_cookie_max_age is not None:
        options["max_age"] = settings.user_cookie_max_age
    return options
