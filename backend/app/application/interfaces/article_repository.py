"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from datetime import datetime

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Each method maps to exactly one SQL statement.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def find(
        self,
        *,
        tags: str | None = None,
        published_date: datetime | None = None,
    ) -> list[Article]:
        """Retrieve all articles matching the given filters (``None`` = no filter)."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article | None:
        """Insert a new article and return it with the generated ID, or None if no row was written."""
        ...

    @abstractmethod
    async def update_fields(self, article_id: int, fields: dict[str, str]) -> Article | None:
        """Write the given columns of one article. Returns None if no row matched."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
