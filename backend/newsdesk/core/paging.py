"""Paging — page normalization and the PageResult bundle returned by every listing.

Invariants:
    - page >= 1 and 1 <= page_size <= MAX_PAGE_SIZE after normalize_paging()
    - total_pages == ceil(total / page_size), 0 when nothing matched
    - A page beyond the last one is empty but keeps total/page/page_size

Design Decisions:
    - Out-of-range paging is clamped, never rejected (listing reads must not fail on bad paging)
    - map() rebuilds items only: metadata is computed once by the query engine
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MAX_PAGE_SIZE: int = 100
DEFAULT_PAGE_SIZE: int = 10


def normalize_paging(page: int, page_size: int) -> tuple[int, int]:
    """Clamp page to >= 1 and page_size to [1, MAX_PAGE_SIZE]."""
    return max(1, page), min(MAX_PAGE_SIZE, max(1, page_size))


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Slice bounds (start, stop) for an already-normalized page."""
    start = (page - 1) * page_size
    return start, start + page_size


@dataclass
class PageResult(Generic[T]):
    """A bounded slice of records plus the metadata describing the full result set."""
    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def map(self, fn: Callable[[T], U]) -> "PageResult[U]":
        """Convert every item, keeping the paging metadata."""
        return PageResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
        )
