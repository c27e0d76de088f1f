from app.models.user import User
from app.models.question import Question
from app.models.answer import Answer

__all__ = ["User", "Question", "Answer"]
