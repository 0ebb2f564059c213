"""Query Engine — generic search, filter, sort and paginate over any entity cursor.

Invariants:
    - run_query is PURE: reads the cursor once, never mutates records
    - Blank or whitespace-only search terms mean "no search"
    - Filters are conjunctive and applied in the order given
    - Unknown sort keys fall back to identity ascending, never raise
    - total counts the filtered set, independent of the requested page
    - Ties on the sort key are broken by identity ascending (stable pagination)

Design Decisions:
    - Per-entity QueryConfig resolves sort keys to accessors once at import time
      instead of dispatching on attribute names per request (type-safe, allow-listed)
    - Two-pass stable sort (identity first, then sort key) keeps tie order fixed
      in both directions
    - None sorts before any value ascending, after any value descending
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, TypeVar

from newsdesk.core.domain_types import EntityKind
from newsdesk.core.paging import PageResult, normalize_paging, page_bounds, DEFAULT_PAGE_SIZE

T = TypeVar("T")

Accessor = Callable[[Any], Any]


# ─── Filters ─────────────────────────────────────────────────────

def _comparable(value: Any, bound: Any) -> tuple[Any, Any]:
    """Align naive and aware datetimes (naive values are treated as UTC)."""
    if isinstance(value, datetime) and isinstance(bound, datetime):
        if value.tzinfo is None and bound.tzinfo is not None:
            value = value.replace(tzinfo=timezone.utc)
        elif bound.tzinfo is None and value.tzinfo is not None:
            bound = bound.replace(tzinfo=timezone.utc)
    return value, bound


@dataclass(frozen=True)
class Eq:
    """Equality predicate. value=None matches records where the field is null."""
    field: str
    value: Any

    def matches(self, actual: Any) -> bool:
        if self.value is None:
            return actual is None
        return actual == self.value


@dataclass(frozen=True)
class Range:
    """Inclusive range predicate; either bound may be omitted."""
    field: str
    low: Any = None
    high: Any = None

    def matches(self, actual: Any) -> bool:
        if actual is None:
            return False
        if self.low is not None:
            value, low = _comparable(actual, self.low)
            if value < low:
                return False
        if self.high is not None:
            value, high = _comparable(actual, self.high)
            if value > high:
                return False
        return True


FieldFilter = Eq | Range


# ─── Query Specification & Configuration ─────────────────────────

@dataclass(frozen=True)
class QuerySpec:
    """What a caller asks for: search, filters, sort and the page window."""
    search: str | None = None
    filters: Sequence[FieldFilter] = ()
    sort_by: str | None = None
    descending: bool = False
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class QueryConfig:
    """Per-entity table of identity, searchable, sortable and filterable fields."""
    entity: EntityKind
    identity: Accessor
    searchable: tuple[Accessor, ...]
    sortable: Mapping[str, Accessor] = field(default_factory=dict)
    filterable: Mapping[str, Accessor] = field(default_factory=dict)

    def sort_accessor(self, sort_by: str | None) -> Accessor | None:
        """Allow-listed accessor for sort_by (case-insensitive), None when unknown."""
        if not sort_by or not sort_by.strip():
            return None
        return self.sortable.get(sort_by.strip().lower())

    def filter_accessor(self, name: str) -> Accessor:
        try:
            return self.filterable[name]
        except KeyError:
            raise ValueError(
                f"{self.entity.value} does not support filtering on '{name}'"
            ) from None


# ─── Pipeline Steps ──────────────────────────────────────────────

def normalize_search(term: str | None) -> str | None:
    """Stripped, case-folded term, or None when there is nothing to search for."""
    if term is None:
        return None
    term = term.strip()
    return term.casefold() if term else None


def matches_search(record: Any, needle: str, searchable: Iterable[Accessor]) -> bool:
    """True when any searchable text field contains needle (already case-folded)."""
    for accessor in searchable:
        value = accessor(record)
        if value is not None and needle in str(value).casefold():
            return True
    return False


def apply_filters(
    records: Iterable[T], filters: Sequence[FieldFilter], config: QueryConfig,
) -> list[T]:
    """Keep records satisfying every filter."""
    checks = [(config.filter_accessor(f.field), f) for f in filters]
    return [
        r for r in records
        if all(f.matches(accessor(r)) for accessor, f in checks)
    ]


def _sort_value(value: Any) -> tuple[bool, Any]:
    if isinstance(value, str):
        value = value.casefold()
    return (value is not None, value)


def apply_sort(
    records: list[T], sort_by: str | None, descending: bool, config: QueryConfig,
) -> list[T]:
    """Order by the allow-listed key, or by identity ascending when the key is unknown."""
    ordered = sorted(records, key=config.identity)
    accessor = config.sort_accessor(sort_by)
    if accessor is None:
        return ordered
    return sorted(
        ordered, key=lambda r: _sort_value(accessor(r)), reverse=descending,
    )


def run_query(
    cursor: Iterable[T], query: QuerySpec, config: QueryConfig,
) -> PageResult[T]:
    """Search → filter → count → sort → slice. Pure; the cursor is read once."""
    page, page_size = normalize_paging(query.page, query.page_size)

    needle = normalize_search(query.search)
    if needle is not None:
        matched = [r for r in cursor if matches_search(r, needle, config.searchable)]
    else:
        matched = list(cursor)

    matched = apply_filters(matched, query.filters, config)
    total = len(matched)

    ordered = apply_sort(matched, query.sort_by, query.descending, config)
    start, stop = page_bounds(page, page_size)
    return PageResult(
        items=ordered[start:stop], total=total, page=page, page_size=page_size,
    )
