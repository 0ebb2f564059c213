"""News Article Service — listing, authoring and tagging of news articles.

Invariants:
    - An article's category exists and is active at create/update time
    - Every requested tag exists before any row is written
    - created_by is the acting account on create; updated_by/modified_at on update
    - Attaching an already-attached tag is a no-op; detaching a missing one is 404

Design Decisions:
    - Relationship objects (category, authors, news_tags) are assigned directly so
      responses render without lazy loads in the async session
    - Tag replacement on update diffs the current set instead of rebuilding the
      collection: unchanged (article, tag) rows keep their identity
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from newsdesk.core.errors import ResourceNotFoundError
from newsdesk.core.paging import PageResult
from newsdesk.core.query_engine import (
    Eq, QuerySpec, Range, apply_filters, apply_sort, run_query,
)
from newsdesk.core.query_tables import NEWS_ARTICLE_QUERY
from newsdesk.core.referential_guard import (
    check_account_exists, check_article_category, check_tags_exist,
)
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.models.account import Account
from newsdesk.models.category import Category
from newsdesk.models.news_article import NewsArticle
from newsdesk.models.news_tag import NewsTag
from newsdesk.models.tag import Tag
from newsdesk.schemas.news_article import (
    NewsArticleCreate, NewsArticleResponse, NewsArticleUpdate,
)

logger = logging.getLogger(__name__)


def to_article_response(article: NewsArticle) -> NewsArticleResponse:
    tag_ids = sorted(nt.tag_id for nt in article.news_tags)
    return NewsArticleResponse(
        id=article.id,
        title=article.title,
        headline=article.headline,
        content=article.content,
        source=article.source,
        category_id=article.category_id,
        category_name=article.category.name if article.category else None,
        is_published=article.is_published,
        created_by_id=article.created_by_id,
        created_by_name=article.created_by.name if article.created_by else None,
        updated_by_id=article.updated_by_id,
        updated_by_name=article.updated_by.name if article.updated_by else None,
        created_at=article.created_at,
        modified_at=article.modified_at,
        tag_ids=tag_ids,
        tags_count=len(tag_ids),
    )


def newest_first(articles, filters) -> list[NewsArticle]:
    """Filtered articles ordered by creation date, newest first."""
    return apply_sort(
        apply_filters(articles, filters, NEWS_ARTICLE_QUERY),
        "createddate", True, NEWS_ARTICLE_QUERY,
    )


class NewsArticleService:
    """News article use cases over an EntityStore."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_articles(
        self,
        query: QuerySpec,
        *,
        category_id: int | None = None,
        created_by_id: int | None = None,
        is_published: bool | None = None,
        created_from: datetime | None = None,
        created_to: datetime | None = None,
    ) -> PageResult[NewsArticleResponse]:
        filters = list(query.filters)
        if category_id is not None:
            filters.append(Eq("category_id", category_id))
        if created_by_id is not None:
            filters.append(Eq("created_by_id", created_by_id))
        if is_published is not None:
            filters.append(Eq("is_published", is_published))
        if created_from is not None or created_to is not None:
            filters.append(Range("created_at", created_from, created_to))

        result = run_query(
            await self.store.fetch_all(NewsArticle),
            replace(query, filters=filters),
            NEWS_ARTICLE_QUERY,
        )
        logger.info(
            f"Retrieved {len(result.items)} news articles out of {result.total} total",
            extra={"entity": "NewsArticle"},
        )
        return result.map(to_article_response)

    async def list_by_category(self, category_id: int) -> list[NewsArticleResponse]:
        if await self.store.fetch_by_id(Category, category_id) is None:
            raise ResourceNotFoundError("Category", category_id)
        articles = newest_first(
            await self.store.fetch_all(NewsArticle), [Eq("category_id", category_id)],
        )
        return [to_article_response(a) for a in articles]

    async def get_article(self, article_id: int) -> NewsArticleResponse:
        return to_article_response(await self._get_or_404(article_id))

    async def create_article(
        self, payload: NewsArticleCreate, author_id: int,
    ) -> NewsArticleResponse:
        author = await self.store.fetch_by_id(Account, author_id)
        check_account_exists(author_id, author)
        category = await self.store.fetch_by_id(Category, payload.category_id)
        check_article_category(payload.category_id, category)
        tag_ids = list(dict.fromkeys(payload.tag_ids))
        await self._check_tags(tag_ids)

        article = NewsArticle(
            title=payload.title,
            headline=payload.headline,
            content=payload.content,
            source=payload.source,
            category=category,
            is_published=payload.is_published,
            created_by=author,
            updated_by=None,
            modified_at=None,
            news_tags=[NewsTag(tag_id=tag_id) for tag_id in tag_ids],
        )
        await self.store.add(article)
        await self.store.commit()
        logger.info(
            f"News article created: {article.title}",
            extra={"entity": "NewsArticle", "entity_id": article.id, "account_id": author_id},
        )
        return to_article_response(article)

    async def update_article(
        self, article_id: int, payload: NewsArticleUpdate, editor_id: int,
    ) -> NewsArticleResponse:
        article = await self._get_or_404(article_id)
        editor = await self.store.fetch_by_id(Account, editor_id)
        check_account_exists(editor_id, editor)
        category = await self.store.fetch_by_id(Category, payload.category_id)
        check_article_category(payload.category_id, category)
        if payload.tag_ids is not None:
            await self._check_tags(payload.tag_ids)

        article.title = payload.title
        article.headline = payload.headline
        article.content = payload.content
        article.source = payload.source
        article.category = category
        article.is_published = payload.is_published
        article.updated_by = editor
        article.modified_at = datetime.now(timezone.utc)
        if payload.tag_ids is not None:
            _replace_tags(article, payload.tag_ids)

        await self.store.commit()
        logger.info(
            f"News article updated: {article.title}",
            extra={"entity": "NewsArticle", "entity_id": article_id, "account_id": editor_id},
        )
        return to_article_response(article)

    async def delete_article(self, article_id: int) -> None:
        article = await self._get_or_404(article_id)
        await self.store.delete(article)
        await self.store.commit()
        logger.info(
            "News article deleted",
            extra={"entity": "NewsArticle", "entity_id": article_id},
        )

    async def attach_tag(self, article_id: int, tag_id: int) -> NewsArticleResponse:
        article = await self._get_or_404(article_id)
        if await self.store.fetch_by_id(Tag, tag_id) is None:
            raise ResourceNotFoundError("Tag", tag_id)
        if tag_id not in {nt.tag_id for nt in article.news_tags}:
            article.news_tags.append(NewsTag(tag_id=tag_id))
            await self.store.commit()
            logger.info(
                f"Tag {tag_id} attached",
                extra={"entity": "NewsArticle", "entity_id": article_id},
            )
        return to_article_response(article)

    async def detach_tag(self, article_id: int, tag_id: int) -> NewsArticleResponse:
        article = await self._get_or_404(article_id)
        link = next((nt for nt in article.news_tags if nt.tag_id == tag_id), None)
        if link is None:
            raise ResourceNotFoundError("Tag on news article", tag_id)
        article.news_tags.remove(link)
        await self.store.commit()
        logger.info(
            f"Tag {tag_id} detached",
            extra={"entity": "NewsArticle", "entity_id": article_id},
        )
        return to_article_response(article)

    # ─── Helpers ─────────────────────────────────────────────────

    async def _get_or_404(self, article_id: int) -> NewsArticle:
        article = await self.store.fetch_by_id(NewsArticle, article_id)
        if article is None:
            raise ResourceNotFoundError("NewsArticle", article_id)
        return article

    async def _check_tags(self, tag_ids: list[int]) -> None:
        if tag_ids:
            known = [tid for tid, _ in await self.store.values_of(Tag.name)]
            check_tags_exist(tag_ids, known)


def _replace_tags(article: NewsArticle, tag_ids: list[int]) -> None:
    wanted = list(dict.fromkeys(tag_ids))
    for link in [nt for nt in article.news_tags if nt.tag_id not in wanted]:
        article.news_tags.remove(link)
    current = {nt.tag_id for nt in article.news_tags}
    for tag_id in wanted:
        if tag_id not in current:
            article.news_tags.append(NewsTag(tag_id=tag_id))
