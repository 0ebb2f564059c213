"""Query Tables — the per-entity QueryConfig used by every listing endpoint.

Invariants:
    - Sort keys are lower-case; the engine lower-cases the requested key before lookup
    - Legacy keys (categoryname, newstitle, ...) and snake_case keys resolve to the same accessor
    - Accessors read attributes only, so records may be ORM rows or any object with the same fields
"""

from operator import attrgetter

from newsdesk.core.domain_types import EntityKind
from newsdesk.core.query_engine import QueryConfig

_id = attrgetter("id")


ACCOUNT_QUERY = QueryConfig(
    entity=EntityKind.ACCOUNT,
    identity=_id,
    searchable=(attrgetter("name"), attrgetter("email")),
    sortable={
        "name": attrgetter("name"),
        "email": attrgetter("email"),
        "role": attrgetter("role"),
    },
    filterable={"role": attrgetter("role")},
)


CATEGORY_QUERY = QueryConfig(
    entity=EntityKind.CATEGORY,
    identity=_id,
    searchable=(attrgetter("name"), attrgetter("description")),
    sortable={
        "categoryname": attrgetter("name"),
        "name": attrgetter("name"),
        "isactive": attrgetter("is_active"),
        "is_active": attrgetter("is_active"),
        "parentcategoryid": attrgetter("parent_id"),
        "parent_id": attrgetter("parent_id"),
    },
    filterable={
        "is_active": attrgetter("is_active"),
        "parent_id": attrgetter("parent_id"),
    },
)


def _news_count(tag) -> int:
    return len(tag.news_tags)


TAG_QUERY = QueryConfig(
    entity=EntityKind.TAG,
    identity=_id,
    searchable=(attrgetter("name"), attrgetter("note")),
    sortable={
        "tagname": attrgetter("name"),
        "name": attrgetter("name"),
        "newscount": _news_count,
        "news_count": _news_count,
    },
)


NEWS_ARTICLE_QUERY = QueryConfig(
    entity=EntityKind.NEWS_ARTICLE,
    identity=_id,
    searchable=(
        attrgetter("title"), attrgetter("headline"),
        attrgetter("content"), attrgetter("source"),
    ),
    sortable={
        "newstitle": attrgetter("title"),
        "title": attrgetter("title"),
        "createddate": attrgetter("created_at"),
        "created_at": attrgetter("created_at"),
        "modifieddate": attrgetter("modified_at"),
        "modified_at": attrgetter("modified_at"),
        "newsstatus": attrgetter("is_published"),
        "is_published": attrgetter("is_published"),
        "categoryid": attrgetter("category_id"),
        "category_id": attrgetter("category_id"),
    },
    filterable={
        "is_published": attrgetter("is_published"),
        "category_id": attrgetter("category_id"),
        "created_by_id": attrgetter("created_by_id"),
        "created_at": attrgetter("created_at"),
    },
)
