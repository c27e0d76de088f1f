from app.schemas.identity import Authenticated, MeOutSchema, Rejected
from app.schemas.quiz import QuestionNotFound, QuestionView

__all__ = [
    "Authenticated",
    "MeOutSchema",
    "QuestionNotFound",
    "QuestionView",
    "Rejected",
]
