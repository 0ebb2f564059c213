"""Category Service — listing, lookup and guarded mutations of the category forest.

Invariants:
    - Every create/update runs the uniqueness guard, then the hierarchy guard, before writing
    - Every delete runs the referential guard (children first, then articles) before writing
    - Guards read snapshots taken inside this request; the write is not isolated from
      concurrent requests (check-then-act)

Design Decisions:
    - Listing loads the whole category cursor and runs the pure query engine over it;
      parent names and dependent counts come from one arena + one grouped count
    - include_subcategories=False with no parent filter lists roots only
"""

import logging
from dataclasses import replace

from newsdesk.core.domain_types import CategoryArena
from newsdesk.core.errors import ResourceNotFoundError
from newsdesk.core.hierarchy_guard import (
    collect_descendants, direct_children,
    validate_category_create, validate_category_update,
)
from newsdesk.core.paging import PageResult
from newsdesk.core.query_engine import Eq, QuerySpec, run_query
from newsdesk.core.query_tables import CATEGORY_QUERY
from newsdesk.core.referential_guard import check_category_deletable, check_unique
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.models.category import Category
from newsdesk.schemas.category import CategoryResponse, CategoryWrite

logger = logging.getLogger(__name__)


class CategoryService:
    """Category use cases over an EntityStore."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_categories(
        self,
        query: QuerySpec,
        *,
        is_active: bool | None = None,
        parent_id: int | None = None,
        include_subcategories: bool = True,
    ) -> PageResult[CategoryResponse]:
        filters = list(query.filters)
        if is_active is not None:
            filters.append(Eq("is_active", is_active))
        if parent_id is not None:
            filters.append(Eq("parent_id", parent_id))
        elif not include_subcategories:
            filters.append(Eq("parent_id", None))

        categories = await self.store.fetch_all(Category)
        result = run_query(
            categories, replace(query, filters=filters), CATEGORY_QUERY,
        )
        names = {c.id: c.name for c in categories}
        arena: CategoryArena = {c.id: c.parent_id for c in categories}
        article_counts = await self.store.article_counts_by_category()
        logger.info(
            f"Retrieved {len(result.items)} categories out of {result.total} total",
            extra={"entity": "Category"},
        )
        return result.map(
            lambda c: _to_response(c, names, arena, article_counts),
        )

    async def get_category(self, category_id: int) -> CategoryResponse:
        category = await self._get_or_404(category_id)
        return await self._describe(category)

    async def list_subcategories(self, category_id: int) -> list[CategoryResponse]:
        """Direct children of category_id, ascending by id."""
        await self._get_or_404(category_id)
        return await self._describe_many(
            lambda arena: direct_children(arena, category_id),
        )

    async def list_descendants(self, category_id: int) -> list[CategoryResponse]:
        """All transitive children of category_id, breadth-first."""
        await self._get_or_404(category_id)
        return await self._describe_many(
            lambda arena: collect_descendants(arena, category_id),
        )

    async def create_category(self, payload: CategoryWrite) -> CategoryResponse:
        check_unique(
            "Category", "name", payload.name,
            await self.store.values_of(Category.name),
        )
        validate_category_create(await self.store.category_arena(), payload.parent_id)

        category = Category(
            name=payload.name,
            description=payload.description,
            parent_id=payload.parent_id,
            is_active=payload.is_active,
        )
        await self.store.add(category)
        await self.store.commit()
        logger.info(
            f"Category created: {category.name}",
            extra={"entity": "Category", "entity_id": category.id},
        )
        return await self._describe(category)

    async def update_category(
        self, category_id: int, payload: CategoryWrite,
    ) -> CategoryResponse:
        category = await self._get_or_404(category_id)
        check_unique(
            "Category", "name", payload.name,
            await self.store.values_of(Category.name),
            exclude_id=category_id,
        )
        validate_category_update(
            await self.store.category_arena(), category_id, payload.parent_id,
        )

        category.name = payload.name
        category.description = payload.description
        category.parent_id = payload.parent_id
        category.is_active = payload.is_active
        await self.store.commit()
        logger.info(
            f"Category updated: {category.name}",
            extra={"entity": "Category", "entity_id": category_id},
        )
        return await self._describe(category)

    async def delete_category(self, category_id: int) -> None:
        category = await self._get_or_404(category_id)
        check_category_deletable(
            category_id,
            child_count=await self.store.count_children(category_id),
            article_count=await self.store.count_articles_in_category(category_id),
        )
        await self.store.delete(category)
        await self.store.commit()
        logger.info(
            "Category deleted",
            extra={"entity": "Category", "entity_id": category_id},
        )

    # ─── Helpers ─────────────────────────────────────────────────

    async def _get_or_404(self, category_id: int) -> Category:
        category = await self.store.fetch_by_id(Category, category_id)
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return category

    async def _describe(self, category: Category) -> CategoryResponse:
        arena = await self.store.category_arena()
        parent_name = None
        if category.parent_id is not None:
            parent = await self.store.fetch_by_id(Category, category.parent_id)
            parent_name = parent.name if parent else None
        return CategoryResponse(
            id=category.id,
            name=category.name,
            description=category.description,
            parent_id=category.parent_id,
            parent_name=parent_name,
            is_active=category.is_active,
            sub_categories_count=len(direct_children(arena, category.id)),
            news_articles_count=await self.store.count_articles_in_category(category.id),
        )

    async def _describe_many(self, select_ids) -> list[CategoryResponse]:
        categories = await self.store.fetch_all(Category)
        by_id = {c.id: c for c in categories}
        names = {c.id: c.name for c in categories}
        arena: CategoryArena = {c.id: c.parent_id for c in categories}
        article_counts = await self.store.article_counts_by_category()
        return [
            _to_response(by_id[cid], names, arena, article_counts)
            for cid in select_ids(arena)
        ]


def _to_response(
    category: Category,
    names: dict[int, str],
    arena: CategoryArena,
    article_counts: dict[int, int],
) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        parent_id=category.parent_id,
        parent_name=names.get(category.parent_id) if category.parent_id else None,
        is_active=category.is_active,
        sub_categories_count=sum(1 for pid in arena.values() if pid == category.id),
        news_articles_count=article_counts.get(category.id, 0),
    )
