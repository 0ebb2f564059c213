"""SQLAlchemy Entity Store — the shell implementation of core EntityStore.

Invariants:
    - Every read is consistent at call time only; nothing here holds a lock
      between a guard's read and the following write (check-then-act)
    - add() (flush) and commit() both map IntegrityError to the same
      IntegrityConflictError after rolling back
    - fetch_all returns fully loaded rows (selectin relationships), safe to read
      after the request session stops doing IO

Design Decisions:
    - Counts are aggregate SELECTs, not collection loads: guards only need numbers
    - values_of(column) pairs each value with its row id so the uniqueness guard
      can exclude the record being updated
"""

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.core.domain_types import CategoryArena
from newsdesk.core.errors import IntegrityConflictError
from newsdesk.models.category import Category
from newsdesk.models.news_article import NewsArticle
from newsdesk.models.news_tag import NewsTag

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class SqlAlchemyEntityStore:
    """EntityStore over one AsyncSession (one request)."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def fetch_all(self, model: type[RecordT]) -> Sequence[RecordT]:
        result = await self.db.execute(select(model))
        return result.scalars().all()

    async def fetch_by_id(self, model: type[RecordT], record_id: Any) -> RecordT | None:
        return await self.db.get(model, record_id)

    async def add(self, record: object) -> None:
        self.db.add(record)
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self._reject(e)

    async def delete(self, record: object) -> None:
        await self.db.delete(record)

    async def commit(self) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self._reject(e)

    async def _reject(self, error: IntegrityError) -> None:
        await self.db.rollback()
        logger.warning(f"Write rejected by database constraint: {error.orig}")
        raise IntegrityConflictError(
            "The write conflicts with existing data (duplicate or dangling reference)."
        )

    # ─── Snapshot helpers ────────────────────────────────────────

    async def category_arena(self) -> CategoryArena:
        result = await self.db.execute(select(Category.id, Category.parent_id))
        return {cid: pid for cid, pid in result.all()}

    async def values_of(self, column: Any) -> list[tuple[int, str | None]]:
        model = column.class_
        result = await self.db.execute(select(model.id, column))
        return [(rid, value) for rid, value in result.all()]

    async def count_children(self, category_id: int) -> int:
        return await self._count(
            select(func.count()).select_from(Category)
            .where(Category.parent_id == category_id)
        )

    async def count_articles_in_category(self, category_id: int) -> int:
        return await self._count(
            select(func.count()).select_from(NewsArticle)
            .where(NewsArticle.category_id == category_id)
        )

    async def count_tag_usage(self, tag_id: int) -> int:
        return await self._count(
            select(func.count()).select_from(NewsTag)
            .where(NewsTag.tag_id == tag_id)
        )

    async def count_authored_articles(self, account_id: int) -> int:
        return await self._count(
            select(func.count()).select_from(NewsArticle)
            .where(NewsArticle.created_by_id == account_id)
        )

    async def article_counts_by_category(self) -> dict[int, int]:
        result = await self.db.execute(
            select(NewsArticle.category_id, func.count())
            .group_by(NewsArticle.category_id)
        )
        return {cid: n for cid, n in result.all()}

    async def _count(self, stmt) -> int:
        result = await self.db.execute(stmt)
        return int(result.scalar_one())
