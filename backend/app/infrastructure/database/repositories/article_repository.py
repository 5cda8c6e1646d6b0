"""Concrete repository implementation backed by SQLAlchemy.

Every method issues a single parameterized statement against the
``article`` table; there are no multi-statement transactions.
"""

from datetime import datetime

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            name=model.name,
            content=model.content,
            tags=model.tags,
            published_date=model.published_date,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find(
        self,
        *,
        tags: str | None = None,
        published_date: datetime | None = None,
    ) -> list[Article]:
        stmt = select(ArticleModel)

        if tags is not None:
            stmt = stmt.where(ArticleModel.tags == tags)
        if published_date is not None:
            stmt = stmt.where(ArticleModel.published_date == published_date)

        stmt = stmt.order_by(ArticleModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article | None:
        stmt = (
            insert(ArticleModel)
            .values(
                {
                    ArticleModel.name: article.name,
                    ArticleModel.content: article.content,
                    ArticleModel.tags: article.tags,
                    ArticleModel.published_date: article.published_date,
                }
            )
            .returning(ArticleModel)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update_fields(self, article_id: int, fields: dict[str, str]) -> Article | None:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values({getattr(ArticleModel, key): value for key, value in fields.items()})
            .returning(ArticleModel)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, article_id: int) -> bool:
        stmt = (
            delete(ArticleModel)
            .where(ArticleModel.id == article_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
