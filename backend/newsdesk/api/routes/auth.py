"""Auth Routes — registration, login and the current account."""

from fastapi import APIRouter, Depends, status

from newsdesk.api.dependencies import get_auth_service, get_current_account
from newsdesk.models.account import Account
from newsdesk.schemas.account import (
    AccountResponse, LoginRequest, RegisterRequest, TokenResponse,
)
from newsdesk.services.account_service import to_account_response
from newsdesk.services.auth_service import AuthService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    return await auth.register(body)


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    return await auth.login(body)


@router.get("/me", response_model=AccountResponse)
async def me(account: Account = Depends(get_current_account)):
    return to_account_response(account)
