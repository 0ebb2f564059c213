"""NewsTag ORM — the article/tag join.

Invariants:
    - Composite primary key (news_article_id, tag_id): a tag is attached at most once
    - Exists only while both endpoints exist (CASCADE on both FKs)
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from newsdesk.db.base import Base


class NewsTag(Base):
    """Association between a news article and a tag."""
    __tablename__ = "news_tags"

    news_article_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("news_articles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Relationships
    article: Mapped["NewsArticle"] = relationship(
        "NewsArticle", back_populates="news_tags",
    )
    tag: Mapped["Tag"] = relationship("Tag", back_populates="news_tags")
