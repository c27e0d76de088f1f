"""Tests for question traversal."""
import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import StoreUnavailable
from app.models.question import Question
from app.schemas.quiz import QuestionNotFound, QuestionView
from app.services.quiz import QuizEngine


class FailingSession:
    """Stands in for AsyncSession when the database is down."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))


class StalledSession:
    async def execute(self, *args, **kwargs):
        await asyncio.sleep(5)


class TestAdvance:
    """Tests for QuizEngine.advance."""

    @pytest.mark.asyncio
    async def test_next_by_order(self, db, quiz):
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.advance(1) == 2
        assert await engine.advance(5) == 3

    @pytest.mark.asyncio
    async def test_gap_between_orders(self, db, quiz):
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.advance(6) == 3
        assert await engine.advance(0) == 1

    @pytest.mark.asyncio
    async def test_none_only_at_maximum(self, db, quiz):
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.advance(9) is None
        assert await engine.advance(100) is None
        assert await engine.advance(8) is not None

    @pytest.mark.asyncio
    async def test_empty_quiz(self, db):
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.advance(0) is None

    @pytest.mark.asyncio
    async def test_tied_orders_pick_lowest_id(self, db):
        db.add_all(
            [
                Question(id=10, text="start", order=1),
                Question(id=12, text="tie b", order=3),
                Question(id=11, text="tie a", order=3),
            ]
        )
        await db.commit()
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.advance(1) == 11
        assert await engine.advance(1) == 11
        assert await engine.advance(3) is None


class TestLoadQuestionView:
    """Tests for QuizEngine.load_question_view."""

    @pytest.mark.asyncio
    async def test_middle_question(self, db, quiz):
        view = await QuizEngine(db, store_timeout=2.0).load_question_view(2)

        assert isinstance(view, QuestionView)
        assert view.question_id == 2
        assert view.text == "Second?"
        assert view.next_question_id == 3
        assert not view.is_last

    @pytest.mark.asyncio
    async def test_answers_keep_insertion_order(self, db, quiz):
        view = await QuizEngine(db, store_timeout=2.0).load_question_view(2)

        assert view.answers == ["b-one", "a-two", "c-three"]

    @pytest.mark.asyncio
    async def test_last_question(self, db, quiz):
        view = await QuizEngine(db, store_timeout=2.0).load_question_view(3)

        assert view.next_question_id is None
        assert view.is_last
        assert view.answers == []

    @pytest.mark.asyncio
    async def test_missing_question(self, db, quiz):
        view = await QuizEngine(db, store_timeout=2.0).load_question_view(4)

        assert isinstance(view, QuestionNotFound)
        assert view.question_id == 4

    @pytest.mark.asyncio
    async def test_id_beyond_integer_range(self, db, quiz):
        view = await QuizEngine(db, store_timeout=2.0).load_question_view(10**30)

        assert isinstance(view, QuestionNotFound)

    @pytest.mark.asyncio
    async def test_idempotent(self, db, quiz):
        engine = QuizEngine(db, store_timeout=2.0)

        assert await engine.load_question_view(1) == await engine.load_question_view(1)


class TestStoreFailures:
    """Store errors surface as StoreUnavailable."""

    @pytest.mark.asyncio
    async def test_database_error(self):
        engine = QuizEngine(FailingSession(), store_timeout=2.0)

        with pytest.raises(StoreUnavailable) as exc_info:
            await engine.load_question_view(1)
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_timeout(self):
        engine = QuizEngine(StalledSession(), store_timeout=0.05)

        with pytest.raises(StoreUnavailable):
            await engine.advance(1)
