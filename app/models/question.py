"""Question model: text plus the sort key that defines quiz order."""
from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from app.db.session import Base


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    # not contiguous; "order" is quoted by SQLAlchemy
    order = Column("order", Integer, nullable=False, index=True)

    answers = relationship("Answer", back_populates="question", order_by="Answer.id")
