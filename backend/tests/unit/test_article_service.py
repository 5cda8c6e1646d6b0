"""Unit tests for the ArticleService."""

from datetime import datetime, timezone

import pytest

from app.application.interfaces import ArticleRepository
from app.application.schemas import ArticleCreate, ArticlePatch, ArticleUpdate
from app.application.services import ArticleService
from app.domain.entities import Article
from app.domain.exceptions import (
    ArticlePersistenceError,
    EmptyUpdateError,
    EntityNotFoundError,
)

PUBLISHED = "2024-07-13T06:11:04.435+07:00"


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    async def find(self, *, tags=None, published_date=None) -> list[Article]:
        return [
            a
            for a in self._articles.values()
            if (tags is None or a.tags == tags)
            and (published_date is None or a.published_date == published_date)
        ]

    async def create(self, article: Article) -> Article | None:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = article
        return article

    async def update_fields(self, article_id: int, fields: dict[str, str]) -> Article | None:
        article = self._articles.get(article_id)
        if article is None:
            return None
        article.update(**fields)
        return article

    async def delete(self, article_id: int) -> bool:
        return self._articles.pop(article_id, None) is not None


class NoRowRepository(FakeArticleRepository):
    async def create(self, article: Article) -> Article | None:
        return None


def _new(name: str = "Hello", tags: str = "intro", published: str = PUBLISHED) -> ArticleCreate:
    return ArticleCreate(name=name, content="World", tags=tags, published_date=published)


@pytest.fixture
def service() -> ArticleService:
    return ArticleService(FakeArticleRepository())


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    article = await service.create_article(_new())
    assert article.id is not None
    assert article.name == "Hello"
    assert article.published_date == datetime(2024, 7, 12, 23, 11, 4, 435000, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_create_article_without_row_raises():
    service = ArticleService(NoRowRepository())
    with pytest.raises(ArticlePersistenceError):
        await service.create_article(_new())


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError, match="no rows in result set"):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_list_articles_filters(service: ArticleService):
    await service.create_article(_new("A1", tags="go"))
    await service.create_article(_new("A2", tags="go", published="2024-08-01T00:00:00Z"))
    await service.create_article(_new("A3", tags="python"))

    assert len(await service.list_articles()) == 3
    assert [a.name for a in await service.list_articles(tags="go")] == ["A1", "A2"]
    assert [a.name for a in await service.list_articles(tags="")] == ["A1", "A2", "A3"]

    same_instant = datetime(2024, 7, 12, 23, 11, 4, 435000, tzinfo=timezone.utc)
    by_date = await service.list_articles(published_date=same_instant)
    assert [a.name for a in by_date] == ["A1", "A3"]

    both = await service.list_articles(tags="go", published_date=same_instant)
    assert [a.name for a in both] == ["A1"]


@pytest.mark.asyncio
async def test_update_article_replaces_mutable_fields(service: ArticleService):
    created = await service.create_article(_new())
    updated = await service.update_article(
        created.id, ArticleUpdate(name="New", content="Body", tags="misc")
    )
    assert (updated.name, updated.content, updated.tags) == ("New", "Body", "misc")
    assert updated.published_date == created.published_date


@pytest.mark.asyncio
async def test_update_missing_article_raises(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(name="x", content="y", tags="z"))


@pytest.mark.asyncio
async def test_patch_article_keeps_unsent_fields(service: ArticleService):
    created = await service.create_article(_new())
    patched = await service.patch_article(created.id, ArticlePatch(content="Updated"))
    assert patched.content == "Updated"
    assert patched.tags == "intro"
    assert patched.name == "Hello"


@pytest.mark.asyncio
async def test_patch_article_requires_a_field(service: ArticleService):
    created = await service.create_article(_new())
    with pytest.raises(EmptyUpdateError):
        await service.patch_article(created.id, ArticlePatch())


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(_new("Delete Me"))
    await service.delete_article(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id)


@pytest.mark.asyncio
async def test_delete_missing_article_raises(service: ArticleService):
    with pytest.raises(EntityNotFoundError, match="article not found"):
        await service.delete_article(7)
