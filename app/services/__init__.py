from app.services.identity import IdentityResolver
from app.services.quiz import QuizEngine
from app.services.seeding import seed_questions

__all__ = ["IdentityResolver", "QuizEngine", "seed_questions"]
