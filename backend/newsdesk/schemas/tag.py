"""Tag Schemas — request/response models for tags."""

from pydantic import BaseModel, Field, field_validator


class TagWrite(BaseModel):
    """Tag create/update payload."""
    name: str = Field(min_length=1, max_length=100)
    note: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class TagResponse(BaseModel):
    id: int
    name: str
    note: str | None = None
    news_articles_count: int = 0
