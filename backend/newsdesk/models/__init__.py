"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Integer identities everywhere; news_tags uses a composite key

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from newsdesk.models.account import Account  # noqa: F401
from newsdesk.models.category import Category  # noqa: F401
from newsdesk.models.tag import Tag  # noqa: F401
from newsdesk.models.news_article import NewsArticle  # noqa: F401
from newsdesk.models.news_tag import NewsTag  # noqa: F401
