"""Identity resolution: session cookie -> user id, and address + name -> binding."""
import logging
import string

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import StoreUnavailable
from app.core.security import decode_session_token
from app.models.user import User
from app.schemas.identity import Authenticated, Rejected
from app.services.store import bounded

logger = logging.getLogger(__name__)

NAME_MISMATCH_REASON = "name does not match this address"

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def names_match(a: str, b: str) -> bool:
    """Compare display names ignoring ASCII case only."""
    return a.translate(_ASCII_FOLD) == b.translate(_ASCII_FOLD)


class IdentityResolver:
    """Binds display names to client addresses, one user per address."""

    def __init__(self, db: AsyncSession, store_timeout: float):
        self.db = db
        self.store_timeout = store_timeout

    async def resolve_identity(self, session_token: str | None) -> int | None:
        """Return the user id for a session token, or None for anonymous.

        A malformed token, or one naming a user that does not exist, is
        anonymous rather than an error.
        """
        user_id = decode_session_token(session_token)
        if user_id is None:
            return None
        result = await bounded(
            self.db.execute(select(User.id).where(User.id == user_id)),
            self.store_timeout,
            "resolve_identity",
        )
        return result.scalar_one_or_none()

    async def register_or_authenticate(
        self, binding_key: str, display_name: str
    ) -> Authenticated | Rejected:
        user = await self._find_by_binding_key(binding_key)
        if user is not None:
            return self._check_name(user, display_name)

        try:
            user_id = await self._create(binding_key, display_name)
        except IntegrityError:
            # lost a race with another registration from the same address
            await self.db.rollback()
            logger.info("registration conflict for %s, re-checking existing row", binding_key)
            user = await self._find_by_binding_key(binding_key)
            if user is None:
                raise StoreUnavailable("register_or_authenticate")
            return self._check_name(user, display_name)

        logger.info("registered user %s for %s", user_id, binding_key)
        return Authenticated(user_id=user_id, created=True)

    def _check_name(self, user: User, display_name: str) -> Authenticated | Rejected:
        if names_match(user.display_name, display_name):
            return Authenticated(user_id=user.id)
        logger.info("rejected name for %s: bound to user %s", user.binding_key, user.id)
        return Rejected(reason=NAME_MISMATCH_REASON)

    async def _find_by_binding_key(self, binding_key: str) -> User | None:
        result = await bounded(
            self.db.execute(select(User).where(User.binding_key == binding_key)),
            self.store_timeout,
            "find_user",
        )
        return result.scalar_one_or_none()

    async def _create(self, binding_key: str, display_name: str) -> int:
        user = User(binding_key=binding_key, display_name=display_name)
        self.db.add(user)
        try:
            await bounded(self.db.flush(), self.store_timeout, "create_user")
            user_id = user.id
            await bounded(self.db.commit(), self.store_timeout, "create_user")
        except StoreUnavailable:
            # a cancelled flush/commit leaves the transaction half done
            await self.db.rollback()
            raise
        return user_id
