"""Route Dependencies — per-request services and the authenticated account.

Invariants:
    - One EntityStore (one AsyncSession) per request, shared by every service it builds
    - A missing or malformed Authorization header is a 401 AuthenticationError
"""

from fastapi import Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.config import get_settings
from newsdesk.core.errors import AuthenticationError
from newsdesk.core.query_engine import QuerySpec
from newsdesk.infrastructure.database import get_db
from newsdesk.models.account import Account
from newsdesk.services.account_service import AccountService
from newsdesk.services.auth_service import AuthService
from newsdesk.services.category_service import CategoryService
from newsdesk.services.entity_store import SqlAlchemyEntityStore
from newsdesk.services.news_article_service import NewsArticleService
from newsdesk.services.seed_service import SeedService
from newsdesk.services.tag_service import TagService


def get_store(db: AsyncSession = Depends(get_db)) -> SqlAlchemyEntityStore:
    return SqlAlchemyEntityStore(db)


def get_account_service(store=Depends(get_store)) -> AccountService:
    return AccountService(store)


def get_category_service(store=Depends(get_store)) -> CategoryService:
    return CategoryService(store)


def get_tag_service(store=Depends(get_store)) -> TagService:
    return TagService(store)


def get_news_article_service(store=Depends(get_store)) -> NewsArticleService:
    return NewsArticleService(store)


def get_auth_service(store=Depends(get_store)) -> AuthService:
    return AuthService(store)


def get_seed_service(store=Depends(get_store)) -> SeedService:
    return SeedService(store)


def extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthenticationError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthenticationError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthenticationError("Authorization must be: Bearer <token>.")
    return token


async def get_current_account(
    authorization: str | None = Header(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> Account:
    return await auth.resolve_token(extract_bearer_token(authorization))


def get_query_spec(
    search: str | None = Query(None, max_length=200),
    sort_by: str | None = Query(None, max_length=50),
    descending: bool = Query(False),
    page: int = Query(1),
    page_size: int | None = Query(None),
) -> QuerySpec:
    """Listing parameters shared by every collection. Paging is clamped by the engine."""
    return QuerySpec(
        search=search,
        sort_by=sort_by,
        descending=descending,
        page=page,
        page_size=page_size if page_size is not None else get_settings().default_page_size,
    )
