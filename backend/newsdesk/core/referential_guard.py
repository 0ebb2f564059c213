"""Referential & Uniqueness Enforcement — delete guards and duplicate checks.

Invariants:
    - All functions are PURE: counts and snapshots are read by the shell beforehand
    - Raise a NewsdeskError subclass on violation, return None on success
    - Category delete: children checked before articles; first error wins
    - Uniqueness compares stripped, case-folded values and ignores the record being updated

Design Decisions:
    - Check-then-act: these checks are not atomic with the following write.
      Exact duplicates are also caught by unique indexes at commit time;
      case-variant duplicates under concurrent writes are not
"""

from collections.abc import Iterable

from newsdesk.core.domain_types import GuardViolation
from newsdesk.core.errors import (
    DuplicateValueError, ErrorContext, InvalidOperationError, ResourceNotFoundError,
)


def check_category_deletable(category_id: int, child_count: int, article_count: int) -> None:
    """Category with subcategories or articles cannot be deleted."""
    if child_count > 0:
        raise InvalidOperationError(
            GuardViolation.HAS_CHILDREN,
            ErrorContext(entity="Category", entity_id=category_id),
        )
    if article_count > 0:
        raise InvalidOperationError(
            GuardViolation.HAS_ARTICLES,
            ErrorContext(entity="Category", entity_id=category_id),
        )


def check_tag_deletable(tag_id: int, usage_count: int) -> None:
    """Tag attached to any article cannot be deleted."""
    if usage_count > 0:
        raise InvalidOperationError(
            GuardViolation.IN_USE,
            ErrorContext(entity="Tag", entity_id=tag_id),
        )


def check_account_deletable(account_id: int, authored_count: int) -> None:
    """Account that authored articles cannot be deleted (created_by_id is required)."""
    if authored_count > 0:
        raise InvalidOperationError(
            GuardViolation.HAS_ARTICLES,
            ErrorContext(entity="Account", entity_id=account_id),
        )


def _fold(value: str) -> str:
    return value.strip().casefold()


def check_unique(
    entity: str,
    field_name: str,
    value: str,
    existing: Iterable[tuple[int, str | None]],
    exclude_id: int | None = None,
) -> None:
    """No other record may hold value (case-insensitive). exclude_id is the record being updated."""
    needle = _fold(value)
    for record_id, other in existing:
        if record_id == exclude_id or other is None:
            continue
        if _fold(other) == needle:
            raise DuplicateValueError(
                entity, field_name, value,
                ErrorContext(entity=entity, entity_id=exclude_id, field=field_name),
            )


def check_article_category(category_id: int, category) -> None:
    """An article's category must exist and be active."""
    if category is None:
        raise ResourceNotFoundError("Category", category_id)
    if not category.is_active:
        raise InvalidOperationError(
            GuardViolation.INACTIVE_CATEGORY,
            ErrorContext(entity="Category", entity_id=category_id, field="category_id"),
        )


def check_account_exists(account_id: int, account) -> None:
    """Author / editor account must exist."""
    if account is None:
        raise ResourceNotFoundError("Account", account_id)


def check_tags_exist(requested: Iterable[int], known: Iterable[int]) -> None:
    """Every requested tag id must be known. Reports the first unknown id."""
    known_ids = set(known)
    for tag_id in requested:
        if tag_id not in known_ids:
            raise ResourceNotFoundError("Tag", tag_id)
