"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE their results are never async themselves:
      the shell orchestrates the async calls around the pure logic
    - Reads are consistent at call time only; two calls are not isolated from each other
"""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from newsdesk.core.domain_types import CategoryArena

RecordT = TypeVar("RecordT")


class EntityStore(Protocol):
    """Contract for entity persistence, implemented by shell."""
    async def fetch_all(self, model: type[RecordT]) -> Sequence[RecordT]: ...
    async def fetch_by_id(self, model: type[RecordT], record_id: Any) -> RecordT | None: ...
    async def add(self, record: object) -> None: ...
    async def delete(self, record: object) -> None: ...
    async def commit(self) -> None: ...

    # Snapshot helpers consumed by the guards
    async def category_arena(self) -> CategoryArena: ...
    async def values_of(self, column: Any) -> list[tuple[int, str | None]]: ...
    async def count_children(self, category_id: int) -> int: ...
    async def count_articles_in_category(self, category_id: int) -> int: ...
    async def count_tag_usage(self, tag_id: int) -> int: ...
    async def count_authored_articles(self, account_id: int) -> int: ...
    async def article_counts_by_category(self) -> dict[int, int]: ...
