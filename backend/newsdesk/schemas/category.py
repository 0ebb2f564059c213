"""Category Schemas — request/response models for the category forest.

Invariants:
    - name: 1-100 chars, stripped, non-empty
    - parent_id None means "root category"; existence and cycles are checked by the guard, not here
    - CategoryWrite is a full replacement (PUT semantics), shared by create and update
"""

from pydantic import BaseModel, Field, field_validator


class CategoryWrite(BaseModel):
    """Category create/update payload."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    parent_id: int | None = None
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class CategoryResponse(BaseModel):
    """Category response with parent name and dependent counts."""
    id: int
    name: str
    description: str | None = None
    parent_id: int | None = None
    parent_name: str | None = None
    is_active: bool
    sub_categories_count: int = 0
    news_articles_count: int = 0
