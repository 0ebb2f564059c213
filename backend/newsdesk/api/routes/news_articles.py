"""News Article Routes — listing, authoring and tagging of news articles.

Invariants:
    - Create/update require a bearer token; its subject becomes created_by/updated_by
    - created_from/created_to bound created_at inclusively
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status

from newsdesk.api.dependencies import (
    get_current_account, get_news_article_service, get_query_spec,
)
from newsdesk.core.query_engine import QuerySpec
from newsdesk.models.account import Account
from newsdesk.schemas.news_article import (
    NewsArticleCreate, NewsArticleResponse, NewsArticleUpdate,
)
from newsdesk.schemas.pagination import PageResponse
from newsdesk.services.news_article_service import NewsArticleService

router = APIRouter(prefix="/api/v1/news-articles", tags=["news-articles"])


@router.get("", response_model=PageResponse[NewsArticleResponse])
async def list_news_articles(
    query: QuerySpec = Depends(get_query_spec),
    category_id: int | None = Query(None),
    created_by_id: int | None = Query(None),
    is_published: bool | None = Query(None),
    created_from: datetime | None = Query(None),
    created_to: datetime | None = Query(None),
    service: NewsArticleService = Depends(get_news_article_service),
):
    result = await service.list_articles(
        query,
        category_id=category_id,
        created_by_id=created_by_id,
        is_published=is_published,
        created_from=created_from,
        created_to=created_to,
    )
    return PageResponse[NewsArticleResponse].from_result(result)


@router.get("/{article_id}", response_model=NewsArticleResponse)
async def get_news_article(
    article_id: int,
    service: NewsArticleService = Depends(get_news_article_service),
):
    return await service.get_article(article_id)


@router.post(
    "", response_model=NewsArticleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_news_article(
    body: NewsArticleCreate,
    account: Account = Depends(get_current_account),
    service: NewsArticleService = Depends(get_news_article_service),
):
    return await service.create_article(body, author_id=account.id)


@router.put("/{article_id}", response_model=NewsArticleResponse)
async def update_news_article(
    article_id: int,
    body: NewsArticleUpdate,
    account: Account = Depends(get_current_account),
    service: NewsArticleService = Depends(get_news_article_service),
):
    return await service.update_article(article_id, body, editor_id=account.id)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news_article(
    article_id: int,
    service: NewsArticleService = Depends(get_news_article_service),
):
    await service.delete_article(article_id)


@router.put("/{article_id}/tags/{tag_id}", response_model=NewsArticleResponse)
async def attach_tag(
    article_id: int,
    tag_id: int,
    service: NewsArticleService = Depends(get_news_article_service),
):
    """Attach tag_id; attaching twice is a no-op."""
    return await service.attach_tag(article_id, tag_id)


@router.delete("/{article_id}/tags/{tag_id}", response_model=NewsArticleResponse)
async def detach_tag(
    article_id: int,
    tag_id: int,
    service: NewsArticleService = Depends(get_news_article_service),
):
    return await service.detach_tag(article_id, tag_id)
