"""Article CRUD endpoints.

Every route answers with the ``{msg, data}`` envelope on success; failures
are rendered by the handlers in ``app.presentation.api.errors``. Service calls
run through ``cancel_on_disconnect`` so a vanished client aborts its query.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, status

from app.application.schemas import (
    ArticleCreate,
    ArticlePatch,
    ArticleResponse,
    ArticleUpdate,
    SuccessEnvelope,
)
from app.application.services import ArticleService
from app.domain.entities import Article
from app.domain.exceptions import EmptyUpdateError, EntityNotFoundError
from app.infrastructure.dependencies import get_article_service
from app.presentation.api.cancellation import cancel_on_disconnect

router = APIRouter(tags=["Articles"])

# Range of the PostgreSQL "integer" primary key
ArticleId = Annotated[int, Path(ge=1, le=2**31 - 1, description="Article ID")]


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


def _parse_rfc3339(raw: str) -> datetime:
    """Parse an RFC 3339 timestamp such as ``2024-07-13T06:11:04.435+07:00``.

    Date-only values and timestamps without a UTC offset are rejected.
    """
    invalid = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"dates: '{raw}' is not a valid RFC 3339 timestamp",
    )
    if len(raw) < 11 or raw[10] not in "Tt":
        raise invalid
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        raise invalid
    if parsed.tzinfo is None:
        raise invalid
    return parsed


@router.get("/all-article/", response_model=SuccessEnvelope[list[ArticleResponse]])
async def list_articles(
    request: Request,
    tags: str | None = Query(None, description="Exact tag string to match"),
    dates: str | None = Query(None, description="URL-encoded RFC 3339 publish timestamp"),
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[list[ArticleResponse]]:
    """List all articles, optionally filtered by tag and/or publish date."""
    published_date = _parse_rfc3339(dates) if dates else None
    articles = await cancel_on_disconnect(
        request, service.list_articles(tags=tags, published_date=published_date)
    )
    return SuccessEnvelope(data=[_to_response(a) for a in articles])


@router.get("/article/{article_id}", response_model=SuccessEnvelope[ArticleResponse])
async def get_article(
    request: Request,
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[ArticleResponse]:
    """Retrieve a single article by ID."""
    try:
        article = await cancel_on_disconnect(request, service.get_article(article_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessEnvelope(data=_to_response(article))


@router.post(
    "/add-article",
    response_model=SuccessEnvelope[ArticleResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_article(
    request: Request,
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[ArticleResponse]:
    """Create a new article; the response carries the storage-assigned id."""
    article = await cancel_on_disconnect(request, service.create_article(data))
    return SuccessEnvelope(data=_to_response(article))


@router.delete("/del-article/{article_id}", response_model=SuccessEnvelope[str])
async def delete_article(
    request: Request,
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[str]:
    """Delete an article by ID."""
    try:
        await cancel_on_disconnect(request, service.delete_article(article_id))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessEnvelope(data="")


@router.put("/put-article/{article_id}", response_model=SuccessEnvelope[ArticleResponse])
async def update_article(
    request: Request,
    article_id: ArticleId,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[ArticleResponse]:
    """Replace name, content and tags of an existing article."""
    try:
        article = await cancel_on_disconnect(request, service.update_article(article_id, data))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessEnvelope(data=_to_response(article))


@router.patch("/patch-article/{article_id}", response_model=SuccessEnvelope[ArticleResponse])
async def patch_article(
    request: Request,
    article_id: ArticleId,
    data: ArticlePatch,
    service: ArticleService = Depends(get_article_service),
) -> SuccessEnvelope[ArticleResponse]:
    """Update only the content and/or tags sent in the body."""
    try:
        article = await cancel_on_disconnect(request, service.patch_article(article_id, data))
    except EmptyUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return SuccessEnvelope(data=_to_response(article))
