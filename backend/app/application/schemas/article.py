"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article. Any ``id`` in the body is ignored."""

    name: str = Field(..., examples=["Hello"])
    content: str = Field(..., examples=["World"])
    tags: str = Field(..., examples=["intro"])
    published_date: datetime = Field(..., examples=["2024-07-13T06:11:04.435+07:00"])


class ArticleUpdate(BaseModel):
    """Schema for a full update — replaces name, content and tags."""

    name: str
    content: str
    tags: str


class ArticlePatch(BaseModel):
    """Schema for a partial update — only the fields sent are written."""

    content: str | None = None
    tags: str | None = None

    def changes(self) -> dict[str, str]:
        """Return the fields explicitly set in the request body."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    content: str
    tags: str
    published_date: datetime

    model_config = {"from_attributes": True}
