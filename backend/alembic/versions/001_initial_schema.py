"""Initial schema — accounts, categories, tags, news_articles, news_tags.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(200), nullable=False),
        sa.Column("role", sa.Integer, nullable=False, server_default="0"),
        sa.Column("password_hash", sa.String(500), nullable=False),
    )
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column(
            "parent_id", sa.Integer,
            sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=True,
        ),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_categories_name", "categories", ["name"], unique=True)
    op.create_index("ix_categories_parent_id", "categories", ["parent_id"])

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("note", sa.String(500), nullable=True),
    )
    op.create_index("ix_tags_name", "tags", ["name"], unique=True)

    op.create_table(
        "news_articles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("headline", sa.String(1000), nullable=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("source", sa.String(200), nullable=True),
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False,
        ),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_by_id", sa.Integer, sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column(
            "updated_by_id", sa.Integer,
            sa.ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("modified_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_news_articles_category_id", "news_articles", ["category_id"])
    op.create_index("ix_news_articles_created_by_id", "news_articles", ["created_by_id"])
    op.create_index("ix_news_articles_updated_by_id", "news_articles", ["updated_by_id"])

    op.create_table(
        "news_tags",
        sa.Column(
            "news_article_id", sa.Integer,
            sa.ForeignKey("news_articles.id", ondelete="CASCADE"), primary_key=True,
        ),
        sa.Column(
            "tag_id", sa.Integer,
            sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("news_tags")
    op.drop_index("ix_news_articles_updated_by_id", table_name="news_articles")
    op.drop_index("ix_news_articles_created_by_id", table_name="news_articles")
    op.drop_index("ix_news_articles_category_id", table_name="news_articles")
    op.drop_table("news_articles")
    op.drop_index("ix_tags_name", table_name="tags")
    op.drop_table("tags")
    op.drop_index("ix_categories_parent_id", table_name="categories")
    op.drop_index("ix_categories_name", table_name="categories")
    op.drop_table("categories")
    op.drop_index("ix_accounts_email", table_name="accounts")
    op.drop_table("accounts")
