"""API routes: JSON for questions and the current identity."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.routers.deps import get_current_user_id, get_quiz_engine
from app.schemas.identity import MeOutSchema
from app.schemas.quiz import QuestionNotFound, QuestionView
from app.services.quiz import QuizEngine

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/questions/{question_id}", response_model=QuestionView)
async def get_question(
    question_id: int,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
):
    """Get one question with its answers and the id of the next one."""
    view = await engine.load_question_view(question_id)
    if isinstance(view, QuestionNotFound):
        raise HTTPException(status_code=404, detail="Question not found")
    return view


@router.get("/me", response_model=MeOutSchema)
async def get_me(user_id: Annotated[int | None, Depends(get_current_user_id)]):
    """Who the identity cookie says we are (null when anonymous)."""
    return MeOutSchema(user_id=user_id)
