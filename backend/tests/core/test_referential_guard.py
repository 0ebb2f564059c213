"""Referential Guard — verifies delete guards and case-insensitive uniqueness.

Invariants:
    - Category delete checks children before articles
    - Tag delete refused while attached to any article
    - Uniqueness ignores case and surrounding whitespace, and the record being updated
"""

from types import SimpleNamespace

import pytest

from newsdesk.core.domain_types import GuardViolation
from newsdesk.core.errors import (
    DuplicateValueError, InvalidOperationError, ResourceNotFoundError,
)
from newsdesk.core.referential_guard import (
    check_account_deletable, check_account_exists, check_article_category,
    check_category_deletable, check_tag_deletable, check_tags_exist, check_unique,
)

NAMES = [(1, "Academic"), (2, "Sports"), (3, None)]


def test_category_with_children_and_articles_reports_children_first():
    with pytest.raises(InvalidOperationError) as exc_info:
        check_category_deletable(1, child_count=2, article_count=5)
    assert exc_info.value.reason == GuardViolation.HAS_CHILDREN
    assert "subcategories" in exc_info.value.message


def test_category_with_articles_only():
    with pytest.raises(InvalidOperationError) as exc_info:
        check_category_deletable(1, child_count=0, article_count=1)
    assert exc_info.value.reason == GuardViolation.HAS_ARTICLES
    assert "category" in exc_info.value.message


def test_empty_category_is_deletable():
    check_category_deletable(1, child_count=0, article_count=0)


def test_tag_in_use_cannot_be_deleted():
    with pytest.raises(InvalidOperationError) as exc_info:
        check_tag_deletable(3, usage_count=1)
    assert exc_info.value.reason == GuardViolation.IN_USE
    check_tag_deletable(3, usage_count=0)


def test_author_account_cannot_be_deleted():
    with pytest.raises(InvalidOperationError) as exc_info:
        check_account_deletable(7, authored_count=2)
    assert exc_info.value.reason == GuardViolation.HAS_ARTICLES
    assert "account" in exc_info.value.message
    check_account_deletable(7, authored_count=0)


@pytest.mark.parametrize("value", ["SPORTS", "sports", "  Sports  "])
def test_unique_is_case_insensitive(value):
    with pytest.raises(DuplicateValueError) as exc_info:
        check_unique("Category", "name", value, NAMES)
    assert exc_info.value.http_status == 409
    assert exc_info.value.context.field == "name"


def test_unique_allows_own_value_on_update():
    check_unique("Category", "name", "sports", NAMES, exclude_id=2)


def test_unique_rejects_other_records_value_on_update():
    with pytest.raises(DuplicateValueError):
        check_unique("Category", "name", "Academic", NAMES, exclude_id=2)


def test_unique_accepts_new_value():
    check_unique("Category", "name", "Technology", NAMES)


def test_article_category_must_exist_and_be_active():
    with pytest.raises(ResourceNotFoundError):
        check_article_category(9, None)
    with pytest.raises(InvalidOperationError) as exc_info:
        check_article_category(3, SimpleNamespace(is_active=False))
    assert exc_info.value.reason == GuardViolation.INACTIVE_CATEGORY
    check_article_category(1, SimpleNamespace(is_active=True))


def test_account_must_exist():
    with pytest.raises(ResourceNotFoundError):
        check_account_exists(4, None)
    check_account_exists(4, SimpleNamespace(id=4))


def test_tags_exist_reports_first_unknown():
    with pytest.raises(ResourceNotFoundError) as exc_info:
        check_tags_exist([1, 8, 9], [1, 2, 3])
    assert exc_info.value.resource_id == 8
    check_tags_exist([], [])
