"""Seed a demo quiz into an empty database."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.answer import Answer
from app.models.question import Question

logger = logging.getLogger(__name__)

# (order, text, answers); orders are deliberately sparse
DEMO_QUIZ = [
    (10, "Which planet is closest to the Sun?", ["Venus", "Mercury", "Mars"]),
    (20, "How many bits are in a byte?", ["4", "8", "16"]),
    (30, "What does HTTP status 404 mean?", ["Not Found", "Forbidden", "Server Error"]),
    (50, "Which protocol resolves host names to addresses?", ["DHCP", "ARP", "DNS"]),
]


async def seed_questions(db: AsyncSession) -> int:
    """Insert DEMO_QUIZ if there are no questions yet; return rows added."""
    count = (await db.execute(select(func.count(Question.id)))).scalar_one()
    if count:
        return 0

    for order, text, answers in DEMO_QUIZ:
        question = Question(text=text, order=order)
        question.answers = [Answer(text=a) for a in answers]
        db.add(question)
    await db.commit()
    logger.info("seeded %d demo questions", len(DEMO_QUIZ))
    return len(DEMO_QUIZ)
