"""Quiz traversal: load a question page and find the one after it."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import MAX_DB_INT
from app.models.answer import Answer
from app.models.question import Question
from app.schemas.quiz import QuestionNotFound, QuestionView
from app.services.store import bounded


class QuizEngine:
    """Read-only traversal over questions by ascending ``order``.

    There is no per-user progress: where a visitor is in the quiz is
    entirely given by the question id they ask for.
    """

    def __init__(self, db: AsyncSession, store_timeout: float):
        self.db = db
        self.store_timeout = store_timeout

    async def advance(self, current_order: int) -> int | None:
        """Id of the question following ``current_order``, None when finished.

        Questions sharing an order value are taken lowest id first.
        """
        stmt = (
            select(Question.id)
            .where(Question.order > current_order)
            .order_by(Question.order.asc(), Question.id.asc())
            .limit(1)
        )
        result = await bounded(self.db.execute(stmt), self.store_timeout, "advance")
        return result.scalar_one_or_none()

    async def load_question_view(self, question_id: int) -> QuestionView | QuestionNotFound:
        # no row can carry an id outside the column range
        if not -MAX_DB_INT - 1 <= question_id <= MAX_DB_INT:
            return QuestionNotFound(question_id=question_id)

        result = await bounded(
            self.db.execute(select(Question).where(Question.id == question_id)),
            self.store_timeout,
            "load_question",
        )
        question = result.scalar_one_or_none()
        if question is None:
            return QuestionNotFound(question_id=question_id)

        # IMPORTANT: with AsyncSession don't rely on lazy relationship loading
        answers_result = await bounded(
            self.db.execute(
                select(Answer.text)
                .where(Answer.question_id == question.id)
                .order_by(Answer.id.asc())
            ),
            self.store_timeout,
            "load_answers",
        )
        answers = list(answers_result.scalars().all())

        return QuestionView(
            question_id=question.id,
            text=question.text,
            answers=answers,
            next_question_id=await self.advance(question.order),
        )
