"""Logging setup for the blog API.

``setup_logging`` is called from the application lifespan. It sets the root
level and tunes the chatty third-party loggers (SQL engine, DB drivers,
uvicorn) independently, so SQL echo can be turned up without drowning the
request logs.
"""

import logging
import sys

from app.config import Settings, get_settings

# Settings field holding the level -> loggers it applies to
_LEVEL_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "asyncpg", "aiosqlite"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in _LEVEL_GROUPS.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s sql=%s uvicorn=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
    )


def _parse_level(raw: str) -> int:
    """Map a level name to its logging constant; unknown names fall back to INFO."""
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO
