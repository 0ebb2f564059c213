"""Account Routes — account management and each account's authored articles.

Invariants:
    - Responses never include password hashes
    - No role policy: any caller may manage accounts
"""

from fastapi import APIRouter, Depends, Query, status

from newsdesk.api.dependencies import get_account_service, get_query_spec
from newsdesk.core.domain_types import AccountRole
from newsdesk.core.query_engine import QuerySpec
from newsdesk.schemas.account import AccountCreate, AccountResponse, AccountUpdate
from newsdesk.schemas.news_article import NewsArticleResponse
from newsdesk.schemas.pagination import PageResponse
from newsdesk.services.account_service import AccountService

router = APIRouter(prefix="/api/v1/accounts", tags=["accounts"])


@router.get("", response_model=PageResponse[AccountResponse])
async def list_accounts(
    query: QuerySpec = Depends(get_query_spec),
    role: AccountRole | None = Query(None),
    service: AccountService = Depends(get_account_service),
):
    result = await service.list_accounts(query, role=role)
    return PageResponse[AccountResponse].from_result(result)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: int, service: AccountService = Depends(get_account_service),
):
    return await service.get_account(account_id)


@router.get("/{account_id}/news-articles", response_model=list[NewsArticleResponse])
async def list_account_articles(
    account_id: int, service: AccountService = Depends(get_account_service),
):
    return await service.list_authored_articles(account_id)


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
async def create_account(
    body: AccountCreate, service: AccountService = Depends(get_account_service),
):
    return await service.create_account(body)


@router.put("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: int,
    body: AccountUpdate,
    service: AccountService = Depends(get_account_service),
):
    return await service.update_account(account_id, body)


@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(
    account_id: int, service: AccountService = Depends(get_account_service),
):
    await service.delete_account(account_id)
