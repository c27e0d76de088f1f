"""FastAPI dependencies wiring settings and the DB session into the quiz core."""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.db.session import get_db
from app.services.identity import IdentityResolver
from app.services.quiz import QuizEngine


def get_identity_resolver(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IdentityResolver:
    return IdentityResolver(db, store_timeout=settings.store_timeout_seconds)


def get_quiz_engine(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> QuizEngine:
    return QuizEngine(db, store_timeout=settings.store_timeout_seconds)


async def get_current_user_id(
    request: Request,
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> int | None:
    """Return the id of the user named by the identity cookie; None if anonymous."""
    return await resolver.resolve_identity(request.cookies.get(settings.user_cookie_name))


def client_binding_key(request: Request) -> str | None:
    """Client network address used to bind identities."""
    if request.client is None:
        return None
    return request.client.host
