"""Category ORM — a node in the self-referencing category forest.

Invariants:
    - parent_id is an optional self FK (ON DELETE RESTRICT)
    - The parent graph is acyclic, enforced by core/hierarchy_guard.py before every write
    - name is unique (DB index); the uniqueness guard also compares case-insensitively

Design Decisions:
    - No ORM parent/children relationships: the forest is handled as an id -> parent id
      arena, so no eager loader ever follows a parent chain
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from newsdesk.db.base import Base


class Category(Base):
    """News category, optionally nested under a parent category."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    parent_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=True, index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
