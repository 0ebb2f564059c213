"""News Article Schemas — request/response models for news articles.

Invariants:
    - title 1-500, headline <= 1000, source <= 200 chars; content non-empty
    - tag_ids on create attaches tags; on update None keeps the current tags,
      a list replaces them
    - Category activity and author existence are checked by the guards, not here
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class NewsArticleFields(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    headline: str | None = Field(None, max_length=1000)
    content: str = Field(min_length=1)
    source: str | None = Field(None, max_length=200)
    category_id: int
    is_published: bool = True

    @field_validator("title", "content")
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class NewsArticleCreate(NewsArticleFields):
    tag_ids: list[int] = Field(default_factory=list)


class NewsArticleUpdate(NewsArticleFields):
    tag_ids: list[int] | None = None


class NewsArticleResponse(BaseModel):
    """News article with resolved category/author names and attached tag ids."""
    id: int
    title: str
    headline: str | None = None
    content: str
    source: str | None = None
    category_id: int
    category_name: str | None = None
    is_published: bool
    created_by_id: int
    created_by_name: str | None = None
    updated_by_id: int | None = None
    updated_by_name: str | None = None
    created_at: datetime
    modified_at: datetime | None = None
    tag_ids: list[int] = Field(default_factory=list)
    tags_count: int = 0
