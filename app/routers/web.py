"""Web routes: entry redirect, login, question pages. Jinja2 templates."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.core.config import TEMPLATES_DIR, Settings, get_settings
from app.core.security import issue_session_token, session_cookie_options
from app.routers.deps import (
    client_binding_key,
    get_current_user_id,
    get_identity_resolver,
    get_quiz_engine,
)
from app.schemas.identity import Authenticated, Rejected
from app.schemas.quiz import QuestionNotFound, QuestionView
from app.services.identity import IdentityResolver
from app.services.quiz import QuizEngine

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# outcome kind -> (template, status code)
OUTCOME_VIEWS = {
    "question": ("question.html", 200),
    "not_found": ("404.html", 404),
    "rejected": ("login_error.html", 403),
}


def render_outcome(
    request: Request, outcome: QuestionView | QuestionNotFound | Rejected
) -> HTMLResponse:
    template, status_code = OUTCOME_VIEWS[outcome.kind]
    return templates.TemplateResponse(
        request,
        template,
        {"outcome": outcome},
        status_code=status_code,
    )


def _first_question_url(request: Request, settings: Settings):
    return request.url_for("question_get", question_id=settings.first_question_id)


# ---------- routes ----------

@router.get("/", response_class=RedirectResponse)
async def home(
    request: Request,
    user_id: Annotated[int | None, Depends(get_current_user_id)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    if user_id is not None:
        return RedirectResponse(_first_question_url(request, settings), status_code=303)
    return RedirectResponse(request.url_for("login_get"), status_code=303)


@router.get("/login", response_class=HTMLResponse)
async def login_get(request: Request):
    """Show the display-name form."""
    return templates.TemplateResponse(request, "login.html", {})


@router.post("/login")
async def login_post(
    request: Request,
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    settings: Annotated[Settings, Depends(get_settings)],
    username: Annotated[str, Form()] = "",
):
    """Bind the display name to the client address and set the identity cookie."""
    display_name = (username or "").strip()
    if not display_name:
        return render_outcome(request, Rejected(reason="please enter a name"))

    binding_key = client_binding_key(request)
    if binding_key is None:
        return render_outcome(request, Rejected(reason="client address unknown"))

    outcome = await resolver.register_or_authenticate(binding_key, display_name)
    if not isinstance(outcome, Authenticated):
        return render_outcome(request, outcome)

    response = RedirectResponse(_first_question_url(request, settings), status_code=303)
    response.set_cookie(
        value=issue_session_token(outcome.user_id),
        **session_cookie_options(settings),
    )
    return response


@router.get("/question/{question_id}", response_class=HTMLResponse)
async def question_get(
    request: Request,
    question_id: int,
    engine: Annotated[QuizEngine, Depends(get_quiz_engine)],
):
    view = await engine.load_question_view(question_id)
    if isinstance(view, QuestionNotFound):
        logger.debug("question %s not found", question_id)
    return render_outcome(request, view)


@router.get("/finished", response_class=HTMLResponse)
async def finished_get(request: Request):
    """Quiz complete."""
    return templates.TemplateResponse(request, "finished.html", {})
