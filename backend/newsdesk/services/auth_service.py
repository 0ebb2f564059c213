"""Auth Service — registration, password login and token-to-account resolution.

Invariants:
    - Login failures never reveal whether the email exists (same message for both)
    - Email lookup is case-insensitive
    - A token whose subject no longer exists is rejected with 401, not 404
"""

import logging

from newsdesk.core.errors import AuthenticationError
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.infrastructure.security import (
    build_access_token, decode_access_token, verify_password,
)
from newsdesk.models.account import Account
from newsdesk.schemas.account import (
    AccountResponse, LoginRequest, RegisterRequest, TokenResponse,
)
from newsdesk.services.account_service import AccountService, to_account_response

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: EntityStore):
        self.store = store
        self.accounts = AccountService(store)

    async def register(self, payload: RegisterRequest) -> TokenResponse:
        account = await self.accounts.create_account(payload)
        return _issue(account)

    async def login(self, payload: LoginRequest) -> TokenResponse:
        record = await self.accounts.find_by_email(payload.email)
        if record is None or not verify_password(payload.password, record.password_hash):
            logger.warning("Login rejected", extra={"entity": "Account"})
            raise AuthenticationError("Invalid email or password.")
        logger.info("Login succeeded", extra={"entity": "Account", "account_id": record.id})
        return _issue(to_account_response(record))

    async def resolve_token(self, token: str) -> Account:
        """Account named by the access token's subject."""
        payload = decode_access_token(token)
        account = await self.store.fetch_by_id(Account, int(payload["sub"]))
        if account is None:
            raise AuthenticationError("Account for this token no longer exists.")
        return account


def _issue(account: AccountResponse) -> TokenResponse:
    token = build_access_token(
        account_id=account.id, email=account.email, role=int(account.role),
    )
    return TokenResponse(access_token=token, account=account)
