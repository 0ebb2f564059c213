"""Account ORM — persists a system account (author, editor, administrator).

Invariants:
    - email is unique (DB index); the uniqueness guard also compares case-insensitively
    - role stores AccountRole as a small integer
    - password_hash is an opaque bcrypt hash, never serialized

Design Decisions:
    - No cascade to articles: accounts that authored articles are not deletable
      (core/referential_guard.py); updated_by_id is nulled by the database (SET NULL)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from newsdesk.core.domain_types import AccountRole
from newsdesk.db.base import Base


class Account(Base):
    """System account."""
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    role: Mapped[int] = mapped_column(
        Integer, nullable=False, default=int(AccountRole.USER),
    )
    password_hash: Mapped[str] = mapped_column(String(500), nullable=False)
