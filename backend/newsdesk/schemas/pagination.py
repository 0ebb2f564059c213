"""Pagination Schemas — the listing envelope shared by all four collections.

Invariants:
    - PageResponse mirrors core PageResult, including derived total_pages/has_next/has_previous
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

from newsdesk.core.paging import PageResult

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """One page of a listing plus metadata for the whole matching set."""
    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_result(cls, result: PageResult) -> "PageResponse[T]":
        return cls(
            items=result.items,
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            has_next=result.has_next,
            has_previous=result.has_previous,
        )
