"""Application service (use case) for Article operations."""

import logging
from datetime import datetime

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticlePatch, ArticleUpdate
from app.domain.entities import Article, to_utc
from app.domain.exceptions import (
    ArticlePersistenceError,
    EmptyUpdateError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(
        self,
        tags: str | None = None,
        published_date: datetime | None = None,
    ) -> list[Article]:
        """List articles, optionally filtered by exact tag string and/or publish instant.

        Empty strings are treated the same as a missing filter.
        """
        return await self._repository.find(
            tags=tags or None,
            published_date=to_utc(published_date) if published_date is not None else None,
        )

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            name=data.name,
            content=data.content,
            tags=data.tags,
            published_date=data.published_date,
        )
        created = await self._repository.create(article)
        if created is None:
            raise ArticlePersistenceError("add")
        logger.info("Created article %s", created.id)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        return await self._write(
            article_id,
            {"name": data.name, "content": data.content, "tags": data.tags},
        )

    async def patch_article(self, article_id: int, data: ArticlePatch) -> Article:
        changes = data.changes()
        if not changes:
            raise EmptyUpdateError(("content", "tags"))
        return await self._write(article_id, changes)

    async def delete_article(self, article_id: int) -> None:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id, reason="article not found")
        logger.info("Deleted article %s", article_id)

    async def _write(self, article_id: int, fields: dict[str, str]) -> Article:
        article = await self._repository.update_fields(article_id, fields)
        if article is None:
            raise EntityNotFoundError("Article", article_id, reason="no rows affected")
        logger.info("Updated article %s (%s)", article_id, ", ".join(sorted(fields)))
        return article
