from .base import Base
from .session import build_engine, build_session_factory, check_connection, get_db_session
from .models import ArticleModel

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "check_connection",
    "get_db_session",
    "ArticleModel",
]
