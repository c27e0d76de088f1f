"""Shared fixtures: in-memory database, quiz data and an HTTP client."""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.answer import Answer
from app.models.question import Question


@pytest.fixture
def settings():
    return Settings(first_question_id=1, seed_demo_quiz=False, store_timeout_seconds=2.0)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def quiz(session_factory):
    """Questions {1: order 1, 2: order 5, 3: order 9} with answers."""
    async with session_factory() as session:
        session.add_all(
            [
                Question(id=1, text="First?", order=1),
                Question(id=2, text="Second?", order=5),
                Question(id=3, text="Third?", order=9),
            ]
        )
        await session.flush()
        session.add_all(
            [
                Answer(question_id=2, text="b-one"),
                Answer(question_id=2, text="a-two"),
                Answer(question_id=2, text="c-three"),
                Answer(question_id=1, text="yes"),
            ]
        )
        await session.commit()


@pytest_asyncio.fixture
async def client(session_factory, settings):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    transport = ASGITransport(app=app, client=("10.0.0.5", 40000))
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()
