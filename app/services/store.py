"""Bounded store access: every query gets a deadline and a uniform failure type."""
import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import StoreUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def bounded(awaitable: Awaitable[T], timeout: float, operation: str) -> T:
    """Await a store call with a deadline.

    IntegrityError passes through untouched so callers can treat a
    constraint violation as a domain outcome; every other database error
    and a timeout become StoreUnavailable.
    """
    try:
        return await asyncio.wait_for(awaitable, timeout)
    except IntegrityError:
        raise
    except asyncio.TimeoutError as exc:
        logger.error("store call %s timed out after %.1fs", operation, timeout)
        raise StoreUnavailable(operation) from exc
    except SQLAlchemyError as exc:
        logger.error("store call %s failed: %s", operation, exc.__class__.__name__)
        raise StoreUnavailable(operation) from exc
