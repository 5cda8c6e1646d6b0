"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime, timezone


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Article:
    """Core domain entity representing a blog article.

    ``tags`` is a single opaque string, not a structured tag set.
    """

    name: str
    content: str
    tags: str
    published_date: datetime
    id: int | None = None

    def __post_init__(self) -> None:
        self.published_date = to_utc(self.published_date)

    def update(
        self,
        name: str | None = None,
        content: str | None = None,
        tags: str | None = None,
    ) -> None:
        """Update the mutable article fields. ``id`` and ``published_date`` never change."""
        if name is not None:
            self.name = name
        if content is not None:
            self.content = content
        if tags is not None:
            self.tags = tags
