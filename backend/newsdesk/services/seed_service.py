"""Seed Service — loads the demo newsroom into an empty database.

Invariants:
    - All rows are written in one transaction: either everything is seeded or nothing
    - Refuses (409) when any account, category or tag already exists
    - Deterministic: article authors rotate through the seeded accounts in order and
      creation dates step back one day per article
"""

import logging
from datetime import datetime, timedelta, timezone

from newsdesk.core.domain_types import AccountRole
from newsdesk.core.errors import IntegrityConflictError
from newsdesk.core.repository_protocols import EntityStore
from newsdesk.infrastructure.security import hash_password
from newsdesk.models.account import Account
from newsdesk.models.category import Category
from newsdesk.models.news_article import NewsArticle
from newsdesk.models.news_tag import NewsTag
from newsdesk.models.tag import Tag
from newsdesk.schemas.system import SeedResponse

logger = logging.getLogger(__name__)


SEED_ACCOUNTS = (
    ("System Admin", "admin@funews.edu.vn", AccountRole.ADMIN, "Admin123!"),
    ("News Staff", "staff@funews.edu.vn", AccountRole.STAFF, "Staff123!"),
    ("John Lecturer", "john.lecturer@funews.edu.vn", AccountRole.LECTURER, "Lecturer123!"),
    ("Jane Staff", "jane.staff@funews.edu.vn", AccountRole.STAFF, "Staff123!"),
    ("Dr. Smith", "dr.smith@funews.edu.vn", AccountRole.LECTURER, "Lecturer123!"),
)

SEED_ROOT_CATEGORIES = (
    ("Academic", "Academic related news and announcements"),
    ("Student Life", "Student activities and campus life"),
    ("Research", "Research activities and publications"),
    ("Sports", "Sports events and achievements"),
    ("Technology", "Technology and innovation news"),
)

# (name, description, parent name)
SEED_SUBCATEGORIES = (
    ("Curriculum Updates", "Updates to academic curriculum", "Academic"),
    ("Faculty News", "Faculty appointments and achievements", "Academic"),
    ("Student Events", "Upcoming student events", "Student Life"),
    ("Club Activities", "Student club activities and news", "Student Life"),
)

SEED_TAGS = (
    ("announcement", "General announcements"),
    ("deadline", "Important deadlines"),
    ("event", "Upcoming events"),
    ("scholarship", "Scholarship opportunities"),
    ("graduation", "Graduation related news"),
    ("exam", "Examination related"),
    ("research", "Research related content"),
    ("innovation", "Innovation and technology"),
    ("competition", "Competitions and contests"),
    ("international", "International programs and exchanges"),
)

SEED_ARTICLES = (
    {
        "title": "New Academic Year Registration Opens",
        "headline": "Students can now register for the upcoming academic year",
        "content": (
            "The registration portal for the new academic year is now open. Students are "
            "encouraged to complete their course registration by the specified deadline to "
            "ensure their preferred class schedules."
        ),
        "source": "Academic Office",
        "category": "Academic",
        "tags": ("announcement", "deadline"),
    },
    {
        "title": "Research Excellence Awards 2024",
        "headline": "Faculty members recognized for outstanding research contributions",
        "content": (
            "The university proudly announces the recipients of this year's Research "
            "Excellence Awards. These faculty members have demonstrated exceptional "
            "dedication to advancing knowledge in their respective fields."
        ),
        "source": "Research Office",
        "category": "Research",
        "tags": ("research", "announcement"),
    },
    {
        "title": "Student Tech Competition Winners",
        "headline": "Computer Science students win national coding competition",
        "content": (
            "Our Computer Science students have achieved remarkable success in the national "
            "coding competition, showcasing their programming skills and innovative thinking."
        ),
        "source": "CS Department",
        "category": "Technology",
        "tags": ("competition", "innovation"),
    },
    {
        "title": "International Exchange Program",
        "headline": "New partnership with European universities announced",
        "content": (
            "The university is excited to announce new partnership agreements with several "
            "prestigious European universities, opening new opportunities for student and "
            "faculty exchanges."
        ),
        "source": "International Office",
        "category": "Academic",
        "tags": ("international", "announcement"),
    },
    {
        "title": "Campus Sports Day 2024",
        "headline": "Annual sports day promises exciting competitions",
        "content": (
            "The annual campus sports day is scheduled for next month, featuring various "
            "competitive sports and recreational activities for students and staff."
        ),
        "source": "Sports Committee",
        "category": "Sports",
        "tags": ("event", "competition"),
    },
)


class SeedService:
    def __init__(self, store: EntityStore):
        self.store = store

    async def seed(self) -> SeedResponse:
        for model in (Account, Category, Tag):
            if await self.store.fetch_all(model):
                raise IntegrityConflictError(
                    "Database already contains data. Seeding is only allowed on an empty database."
                )

        accounts = await self._seed_accounts()
        categories = await self._seed_categories()
        tags = await self._seed_tags()
        articles = await self._seed_articles(accounts, categories, tags)
        await self.store.commit()

        logger.info(
            f"Seeded {len(accounts)} accounts, {len(categories)} categories, "
            f"{len(tags)} tags, {len(articles)} news articles"
        )
        return SeedResponse(
            message="Database seeded successfully",
            accounts=len(accounts),
            categories=len(categories),
            tags=len(tags),
            news_articles=len(articles),
        )

    async def _seed_accounts(self) -> list[Account]:
        accounts = []
        for name, email, role, password in SEED_ACCOUNTS:
            account = Account(
                name=name, email=email, role=int(role), password_hash=hash_password(password),
            )
            await self.store.add(account)
            accounts.append(account)
        return accounts

    async def _seed_categories(self) -> dict[str, Category]:
        categories: dict[str, Category] = {}
        for name, description in SEED_ROOT_CATEGORIES:
            category = Category(name=name, description=description, parent_id=None, is_active=True)
            await self.store.add(category)
            categories[name] = category
        for name, description, parent in SEED_SUBCATEGORIES:
            category = Category(
                name=name, description=description,
                parent_id=categories[parent].id, is_active=True,
            )
            await self.store.add(category)
            categories[name] = category
        return categories

    async def _seed_tags(self) -> dict[str, Tag]:
        tags: dict[str, Tag] = {}
        for name, note in SEED_TAGS:
            tag = Tag(name=name, note=note, news_tags=[])
            await self.store.add(tag)
            tags[name] = tag
        return tags

    async def _seed_articles(
        self,
        accounts: list[Account],
        categories: dict[str, Category],
        tags: dict[str, Tag],
    ) -> list[NewsArticle]:
        now = datetime.now(timezone.utc)
        articles = []
        for i, data in enumerate(SEED_ARTICLES):
            article = NewsArticle(
                title=data["title"],
                headline=data["headline"],
                content=data["content"],
                source=data["source"],
                category=categories[data["category"]],
                is_published=True,
                created_by=accounts[i % len(accounts)],
                updated_by=None,
                created_at=now - timedelta(days=i + 1),
                modified_at=None,
                news_tags=[NewsTag(tag_id=tags[name].id) for name in data["tags"]],
            )
            await self.store.add(article)
            articles.append(article)
        return articles
