"""Account & Auth Schemas — Pydantic models for account management and login.

Invariants:
    - Emails are stripped and lower-cased at the boundary
    - password never appears in any response model
    - role accepts only AccountRole values (0-3)

Design Decisions:
    - Validators live on AccountFields and are inherited, not redeclared per model
"""

from pydantic import BaseModel, Field, field_validator

from newsdesk.core.domain_types import AccountRole


class AccountFields(BaseModel):
    """Shared name/email fields with normalization."""
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        local, _, domain = v.partition("@")
        if not local or not domain:
            raise ValueError("email must be a valid address")
        return v


class AccountCreate(AccountFields):
    """Account creation by an administrator."""
    password: str = Field(min_length=6, max_length=128)
    role: AccountRole = AccountRole.USER


class RegisterRequest(AccountCreate):
    """Self-registration: same shape as an administrator-created account."""


class AccountUpdate(AccountFields):
    """Profile update: full replacement of name, email and role."""
    role: AccountRole


class AccountResponse(BaseModel):
    """Account response: public-facing account data."""
    id: int
    name: str
    email: str
    role: AccountRole


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=200)
    password: str = Field(min_length=1, max_length=128)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountResponse
