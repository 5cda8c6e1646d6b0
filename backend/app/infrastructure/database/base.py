"""SQLAlchemy ORM base shared by the blog models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; ``Base.metadata`` describes the tables the service expects to exist."""
