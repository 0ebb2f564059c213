"""Domain Types — enums and snapshot aliases shared by the pure core.

Invariants:
    - AccountRole is the single canonical role encoding (0-3)
    - All guard outcomes encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - AccountRole is an IntEnum: persisted as a small integer column
"""

from collections.abc import Mapping
from enum import Enum, IntEnum


# ─── Snapshot Types ──────────────────────────────────────────────

# Snapshot of the category forest: id -> parent id (None for roots)
CategoryArena = Mapping[int, int | None]


# ─── Enums ───────────────────────────────────────────────────────

class AccountRole(IntEnum):
    """Canonical account roles; maps to DB `role` column."""
    USER = 0
    ADMIN = 1
    STAFF = 2
    LECTURER = 3


class GuardViolation(str, Enum):
    """Reasons a guard rejects a mutation with InvalidOperation."""
    SELF_PARENT = "self_parent"
    CYCLE = "cycle"
    HAS_CHILDREN = "has_children"
    HAS_ARTICLES = "has_articles"
    IN_USE = "in_use"
    INACTIVE_CATEGORY = "inactive_category"


class EntityKind(str, Enum):
    """Entity collections served by the query engine."""
    ACCOUNT = "Account"
    CATEGORY = "Category"
    TAG = "Tag"
    NEWS_ARTICLE = "NewsArticle"
