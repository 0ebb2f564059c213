"""Credential Primitives — bcrypt password hashing and JWT access tokens.

Invariants:
    - Plain passwords never stored or logged; only bcrypt hashes leave this module
    - Access tokens carry sub (account id), email, role, type="access", iat, exp
    - decode_access_token raises AuthenticationError for any invalid/expired/foreign token

Design Decisions:
    - Secret, algorithm and lifetime read from Settings on every call (tests override env)
    - No refresh tokens: sessions end when the access token expires
"""

import time
from typing import Any

import bcrypt
import jwt

from newsdesk.config import get_settings
from newsdesk.core.errors import AuthenticationError


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthenticationError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, account_id: int, email: str, role: int) -> str:
    settings = get_settings()
    issued_at = int(time.time())
    payload = {
        "sub": str(account_id),
        "email": email,
        "role": int(role),
        "type": "access",
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthenticationError("Access token is empty.")

    settings = get_settings()
    try:
        payload = jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError("Invalid access token.") from exc

    if str(payload.get("type") or "").lower() != "access":
        raise AuthenticationError("Token is not an access token.")
    if not str(payload.get("sub") or "").isdigit():
        raise AuthenticationError("Invalid access token subject.")
    return payload
