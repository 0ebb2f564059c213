"""Tag ORM — a free-form label attached to news articles through news_tags.

Invariants:
    - name is unique (DB index)
    - Deletable only when no news_tags row references it (core/referential_guard.py)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsdesk.db.base import Base


class Tag(Base):
    """Label for news articles."""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    note: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    news_tags: Mapped[list["NewsTag"]] = relationship(
        "NewsTag", back_populates="tag", lazy="selectin",
    )
