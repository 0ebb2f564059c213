"""Error Hierarchy — verifies codes, HTTP statuses and the response envelope."""

from newsdesk.core.domain_types import GuardViolation
from newsdesk.core.errors import (
    AuthenticationError, DatabaseError, DuplicateValueError, ErrorCategory,
    ErrorContext, IntegrityConflictError, InvalidOperationError, NewsdeskError,
    ResourceNotFoundError,
)


def test_not_found_envelope():
    response = ResourceNotFoundError("Category", 12).to_response()
    error = response["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Category '12' not found"
    assert error["category"] == "resource_not_found"
    assert error["context"]["entity"] == "Category"


def test_http_statuses():
    assert ResourceNotFoundError("Tag", 1).http_status == 404
    assert DuplicateValueError("Tag", "name", "exam").http_status == 409
    assert IntegrityConflictError("conflict").http_status == 409
    assert InvalidOperationError(GuardViolation.CYCLE).http_status == 400
    assert AuthenticationError("nope").http_status == 401
    assert DatabaseError("down", "execute").http_status == 503


def test_invalid_operation_carries_reason():
    exc = InvalidOperationError(
        GuardViolation.HAS_ARTICLES, ErrorContext(entity="Account", entity_id=3),
    )
    error = exc.to_response()["error"]
    assert error["reason"] == "has_articles"
    assert error["category"] == ErrorCategory.BUSINESS_RULE.value
    assert error["message"].startswith("Cannot delete account")


def test_every_guard_violation_has_a_message():
    for reason in GuardViolation:
        assert InvalidOperationError(reason).message


def test_all_errors_share_the_base():
    assert issubclass(DuplicateValueError, NewsdeskError)
    assert issubclass(DatabaseError, NewsdeskError)
