# This project was developed with assistance from AI tools.
"""
Library configuration.

All settings read from environment variables with sensible defaults.
Only the FastAPI wiring in ``handlers.py`` consults these; the value type
and its constructors are pure and ignore configuration entirely.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Library settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "problem-details"
    DEBUG: bool = False

    # -- Problem responses --
    PROBLEM_MEDIA_TYPE: str = Field(
        default="application/problem+json",
        description="Content-Type sent with serialized problem bodies.",
    )
    UNHANDLED_ERROR_DETAIL: str = Field(
        default="An unexpected error occurred.",
        description="Detail text returned for unhandled exceptions. Exception text never leaks.",
    )
    REQUEST_ID_HEADER: str = Field(
        default="x-request-id",
        description="Header carrying the correlation ID logged alongside failures.",
    )
    PROBLEM_INSTANCE_FROM_PATH: bool = Field(
        default=False,
        description="Fill an empty ``instance`` with the request path before responding.",
    )


settings = Settings()
