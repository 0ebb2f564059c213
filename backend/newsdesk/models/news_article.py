"""NewsArticle ORM — a published or draft news item.

Invariants:
    - Belongs to exactly one Category (FK, ON DELETE RESTRICT); active at create/update time
    - created_by_id references the authoring Account; updated_by_id the last editor (SET NULL)
    - Deleting an article deletes its news_tags rows (ORM delete-orphan + DB CASCADE)

Design Decisions:
    - category/created_by/updated_by loaded with selectin: listings render their names
      without per-row queries
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsdesk.db.base import Base


class NewsArticle(Base):
    """News article filed under a category."""
    __tablename__ = "news_articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    headline: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str | None] = mapped_column(String(200), nullable=True)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False, index=True,
    )
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_by_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id"), nullable=False, index=True,
    )
    updated_by_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    modified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    category: Mapped["Category"] = relationship("Category", lazy="selectin")
    created_by: Mapped["Account"] = relationship(
        "Account", foreign_keys=[created_by_id], lazy="selectin",
    )
    updated_by: Mapped["Account | None"] = relationship(
        "Account", foreign_keys=[updated_by_id], lazy="selectin",
    )
    news_tags: Mapped[list["NewsTag"]] = relationship(
        "NewsTag", back_populates="article",
        cascade="all, delete-orphan", lazy="selectin",
    )
