from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from the .env file and environment variables."""

    app_title: str = "Personal Blog API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Required — there is no sensible default connection string
    database_url: str

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:3000"]
    sql_echo: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("database_url")
    @classmethod
    def _require_database_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DATABASE_URL must not be empty")
        return value.strip()


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once.

    Raises ``pydantic.ValidationError`` when DATABASE_URL is missing or empty,
    which aborts startup.
    """
    return Settings()
