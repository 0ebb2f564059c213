"""Tag Service — listing, lookup and guarded mutations of tags.

Invariants:
    - Tag names are unique case-insensitively (uniqueness guard + DB unique index)
    - A tag attached to any article cannot be deleted
"""

import logging

from newsdesk.core.errors import ResourceNotFoundError
from newsdesk.core.paging import PageResult
from newsdesk.core.query_engine import QuerySpec, run_query
from newsdesk.core.query_tables import TAG_QUERY
from newsdesk.core.referential_guard import check_tag_deletable, check_unique
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.models.tag import Tag
from newsdesk.schemas.tag import TagResponse, TagWrite

logger = logging.getLogger(__name__)


def to_tag_response(tag: Tag) -> TagResponse:
    return TagResponse(
        id=tag.id,
        name=tag.name,
        note=tag.note,
        news_articles_count=len(tag.news_tags),
    )


class TagService:
    """Tag use cases over an EntityStore."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_tags(self, query: QuerySpec) -> PageResult[TagResponse]:
        result = run_query(await self.store.fetch_all(Tag), query, TAG_QUERY)
        logger.info(
            f"Retrieved {len(result.items)} tags out of {result.total} total",
            extra={"entity": "Tag"},
        )
        return result.map(to_tag_response)

    async def get_tag(self, tag_id: int) -> TagResponse:
        return to_tag_response(await self._get_or_404(tag_id))

    async def create_tag(self, payload: TagWrite) -> TagResponse:
        check_unique("Tag", "name", payload.name, await self.store.values_of(Tag.name))

        tag = Tag(name=payload.name, note=payload.note, news_tags=[])
        await self.store.add(tag)
        await self.store.commit()
        logger.info(
            f"Tag created: {tag.name}",
            extra={"entity": "Tag", "entity_id": tag.id},
        )
        return to_tag_response(tag)

    async def update_tag(self, tag_id: int, payload: TagWrite) -> TagResponse:
        tag = await self._get_or_404(tag_id)
        check_unique(
            "Tag", "name", payload.name,
            await self.store.values_of(Tag.name),
            exclude_id=tag_id,
        )
        tag.name = payload.name
        tag.note = payload.note
        await self.store.commit()
        logger.info(
            f"Tag updated: {tag.name}",
            extra={"entity": "Tag", "entity_id": tag_id},
        )
        return to_tag_response(tag)

    async def delete_tag(self, tag_id: int) -> None:
        tag = await self._get_or_404(tag_id)
        check_tag_deletable(tag_id, await self.store.count_tag_usage(tag_id))
        await self.store.delete(tag)
        await self.store.commit()
        logger.info("Tag deleted", extra={"entity": "Tag", "entity_id": tag_id})

    async def _get_or_404(self, tag_id: int) -> Tag:
        tag = await self.store.fetch_by_id(Tag, tag_id)
        if tag is None:
            raise ResourceNotFoundError("Tag", tag_id)
        return tag
