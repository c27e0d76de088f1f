"""SQLAlchemy declarative base and model imports for Alembic."""
from app.db.session import Base

# Import all models so Alembic can see them
from app.models.answer import Answer  # noqa: F401
from app.models.question import Question  # noqa: F401
from app.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Question", "Answer"]
