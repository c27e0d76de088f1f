"""Address-bound quiz - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import STATIC_DIR, get_settings
from app.core.errors import StoreUnavailable
from app.core.logging import configure_logging
from app.db.base import Base
from app.db.session import engine, AsyncSessionLocal
from app.routers import web, api
from app.routers.web import templates
from app.services.seeding import seed_questions

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_demo_quiz:
        async with AsyncSessionLocal() as db:
            await seed_questions(db)

    yield
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Linear quiz with address-bound identities",
    lifespan=lifespan,
)

# Mount static files at /static
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(web.router)
app.include_router(api.router)


@app.exception_handler(StoreUnavailable)
async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    logger.error("request %s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.__cause__)
    if request.url.path.startswith("/api/"):
        return JSONResponse({"detail": "Internal server error"}, status_code=500)
    return templates.TemplateResponse(request, "500.html", {}, status_code=500)


@app.get("/health")
async def health():
    return {"status": "ok"}
