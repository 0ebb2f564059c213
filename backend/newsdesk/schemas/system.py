"""System Schemas — responses of the maintenance endpoints."""

from pydantic import BaseModel


class SeedResponse(BaseModel):
    message: str
    accounts: int
    categories: int
    tags: int
    news_articles: int
