"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Address Quiz"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./quiz.db"
    db_pool_timeout: float = 3.0  # seconds to wait for a pooled connection
    store_timeout_seconds: float = 3.0  # upper bound for any single query

    # Quiz
    first_question_id: int = 1
    seed_demo_quiz: bool = True

    # Identity cookie
    user_cookie_name: str = "user_id"
    user_cookie_secure: bool = False  # sessions accepted over plain http
    user_cookie_max_age: int | None = None  # None = browser session cookie

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


# Largest id a database INTEGER column can hold (signed 64-bit)
MAX_DB_INT = 2**63 - 1

# Base path for templates/static (parent of app/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent
TEMPLATES_DIR = BASE_DIR / "app" / "templates"
STATIC_DIR = BASE_DIR / "app" / "static"
