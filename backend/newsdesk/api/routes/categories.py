"""Category Routes — CRUD plus subtree navigation of the category forest.

Invariants:
    - Hierarchy and delete guards run in CategoryService; routes only translate HTTP
    - include_subcategories=false without parent_id lists root categories only
"""

from fastapi import APIRouter, Depends, Query, status

from newsdesk.api.dependencies import (
    get_category_service, get_news_article_service, get_query_spec,
)
from newsdesk.core.query_engine import QuerySpec
from newsdesk.schemas.category import CategoryResponse, CategoryWrite
from newsdesk.schemas.news_article import NewsArticleResponse
from newsdesk.schemas.pagination import PageResponse
from newsdesk.services.category_service import CategoryService
from newsdesk.services.news_article_service import NewsArticleService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=PageResponse[CategoryResponse])
async def list_categories(
    query: QuerySpec = Depends(get_query_spec),
    is_active: bool | None = Query(None),
    parent_id: int | None = Query(None),
    include_subcategories: bool = Query(True),
    service: CategoryService = Depends(get_category_service),
):
    result = await service.list_categories(
        query, is_active=is_active, parent_id=parent_id,
        include_subcategories=include_subcategories,
    )
    return PageResponse[CategoryResponse].from_result(result)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    return await service.get_category(category_id)


@router.get("/{category_id}/subcategories", response_model=list[CategoryResponse])
async def list_subcategories(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    """Direct children only."""
    return await service.list_subcategories(category_id)


@router.get("/{category_id}/descendants", response_model=list[CategoryResponse])
async def list_descendants(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    """Every category below category_id, nearest levels first."""
    return await service.list_descendants(category_id)


@router.get("/{category_id}/news-articles", response_model=list[NewsArticleResponse])
async def list_category_articles(
    category_id: int,
    service: NewsArticleService = Depends(get_news_article_service),
):
    return await service.list_by_category(category_id)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryWrite, service: CategoryService = Depends(get_category_service),
):
    return await service.create_category(body)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    body: CategoryWrite,
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_category(category_id, body)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    await service.delete_category(category_id)
