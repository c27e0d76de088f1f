"""Pydantic schemas for question views returned by the traversal engine."""
from typing import Literal

from pydantic import BaseModel


class QuestionView(BaseModel):
    kind: Literal["question"] = "question"
    question_id: int
    text: str
    answers: list[str]
    next_question_id: int | None = None  # None: this is the last question

    @property
    def is_last(self) -> bool:
        return self.next_question_id is None


class QuestionNotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"
    question_id: int
