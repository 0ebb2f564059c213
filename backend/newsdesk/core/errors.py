"""Error Hierarchy — typed, categorized exceptions for all Newsdesk failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Guard errors (400-level) reject one request; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NewsdeskError base: one FastAPI global handler renders them all
    - InvalidOperationError carries a GuardViolation reason instead of one class per rule
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from newsdesk.core.domain_types import GuardViolation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class NewsdeskError(Exception):
    """Base exception for all Newsdesk errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Guard Errors (400-level) ───────────────────────────────────

class ResourceNotFoundError(NewsdeskError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateValueError(NewsdeskError):
    """Uniqueness constraint would be violated."""
    def __init__(
        self, entity: str, field_name: str, value: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=entity, field=field_name)
        super().__init__(
            f"{entity} {field_name} '{value}' already exists",
            "DUPLICATE_VALUE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.field_name = field_name
        self.value = value


class IntegrityConflictError(NewsdeskError):
    """A database constraint rejected the write (e.g. a concurrent duplicate)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTEGRITY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


_VIOLATION_MESSAGES: dict[GuardViolation, str] = {
    GuardViolation.SELF_PARENT: "Category cannot be its own parent.",
    GuardViolation.CYCLE: (
        "Circular reference detected. Category cannot be moved under its own subcategory."
    ),
    GuardViolation.HAS_CHILDREN: (
        "Cannot delete category that has subcategories. "
        "Delete or reassign the subcategories first."
    ),
    GuardViolation.HAS_ARTICLES: (
        "Cannot delete {entity} that has news articles. "
        "Move or delete the news articles first."
    ),
    GuardViolation.IN_USE: (
        "Cannot delete tag that is attached to news articles. "
        "Remove the tag from those articles first."
    ),
    GuardViolation.INACTIVE_CATEGORY: "News articles cannot be filed under an inactive category.",
}


class InvalidOperationError(NewsdeskError):
    """Mutation rejected by a hierarchy or referential guard."""
    def __init__(self, reason: GuardViolation, context: ErrorContext | None = None):
        entity = (context.entity if context and context.entity else "record").lower()
        super().__init__(
            _VIOLATION_MESSAGES[reason].format(entity=entity),
            "INVALID_OPERATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.reason = reason

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["reason"] = self.reason.value
        return response


class AuthenticationError(NewsdeskError):
    """Credentials or access token rejected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(NewsdeskError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
