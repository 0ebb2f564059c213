"""Account Service — account management and the per-author article listing.

Invariants:
    - Emails are unique case-insensitively (uniqueness guard + DB unique index)
    - Passwords are hashed before they reach the store; hashes never leave this module
    - An account that authored articles cannot be deleted
"""

import logging
from dataclasses import replace

from newsdesk.core.domain_types import AccountRole
from newsdesk.core.errors import ResourceNotFoundError
from newsdesk.core.paging import PageResult
from newsdesk.core.query_engine import Eq, QuerySpec, run_query
from newsdesk.core.query_tables import ACCOUNT_QUERY
from newsdesk.core.referential_guard import check_account_deletable, check_unique
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.infrastructure.security import hash_password
from newsdesk.models.account import Account
from newsdesk.models.news_article import NewsArticle
from newsdesk.schemas.account import AccountCreate, AccountResponse, AccountUpdate
from newsdesk.schemas.news_article import NewsArticleResponse
from newsdesk.services.news_article_service import newest_first, to_article_response

logger = logging.getLogger(__name__)


def to_account_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id, name=account.name, email=account.email, role=account.role,
    )


class AccountService:
    """Account use cases over an EntityStore."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_accounts(
        self, query: QuerySpec, *, role: AccountRole | None = None,
    ) -> PageResult[AccountResponse]:
        filters = list(query.filters)
        if role is not None:
            filters.append(Eq("role", int(role)))
        result = run_query(
            await self.store.fetch_all(Account),
            replace(query, filters=filters),
            ACCOUNT_QUERY,
        )
        logger.info(
            f"Retrieved {len(result.items)} accounts out of {result.total} total",
            extra={"entity": "Account"},
        )
        return result.map(to_account_response)

    async def get_account(self, account_id: int) -> AccountResponse:
        return to_account_response(await self.get_account_record(account_id))

    async def get_account_record(self, account_id: int) -> Account:
        account = await self.store.fetch_by_id(Account, account_id)
        if account is None:
            raise ResourceNotFoundError("Account", account_id)
        return account

    async def find_by_email(self, email: str) -> Account | None:
        needle = email.strip().casefold()
        for account in await self.store.fetch_all(Account):
            if account.email.casefold() == needle:
                return account
        return None

    async def create_account(self, payload: AccountCreate) -> AccountResponse:
        check_unique(
            "Account", "email", payload.email, await self.store.values_of(Account.email),
        )
        account = Account(
            name=payload.name,
            email=payload.email,
            role=int(payload.role),
            password_hash=hash_password(payload.password),
        )
        await self.store.add(account)
        await self.store.commit()
        logger.info(
            f"Account created with role {payload.role.name}",
            extra={"entity": "Account", "entity_id": account.id},
        )
        return to_account_response(account)

    async def update_account(
        self, account_id: int, payload: AccountUpdate,
    ) -> AccountResponse:
        account = await self.get_account_record(account_id)
        check_unique(
            "Account", "email", payload.email,
            await self.store.values_of(Account.email),
            exclude_id=account_id,
        )
        account.name = payload.name
        account.email = payload.email
        account.role = int(payload.role)
        await self.store.commit()
        logger.info("Account updated", extra={"entity": "Account", "entity_id": account_id})
        return to_account_response(account)

    async def delete_account(self, account_id: int) -> None:
        account = await self.get_account_record(account_id)
        check_account_deletable(
            account_id, await self.store.count_authored_articles(account_id),
        )
        await self.store.delete(account)
        await self.store.commit()
        logger.info("Account deleted", extra={"entity": "Account", "entity_id": account_id})

    async def list_authored_articles(self, account_id: int) -> list[NewsArticleResponse]:
        """Articles created by account_id, newest first."""
        await self.get_account_record(account_id)
        articles = newest_first(
            await self.store.fetch_all(NewsArticle), [Eq("created_by_id", account_id)],
        )
        return [to_article_response(a) for a in articles]
