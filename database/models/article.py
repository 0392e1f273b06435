"""Article model definitions."""
from enum import Enum
from typing import Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# Pseudo-category: every article, ordered by popularity
TRENDING = "trending"


class Category(str, Enum):
    """Article category enumeration."""
    TECHNOLOGY = "technology"
    POLITICS = "politics"
    SPORTS = "sports"
    BUSINESS = "business"
    HEALTH = "health"
    ENTERTAINMENT = "entertainment"


class ArticleCreate(BaseModel):
    """Fields supplied when creating an article."""
    title: str
    summary: str
    content: Optional[str] = None
    source: str
    category: str
    image_url: Optional[str] = None
    url: Optional[str] = None
    published_at: datetime

    @field_validator('published_at')
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC so all articles sort together."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Article(ArticleCreate):
    """Article model for storage representation."""
    id: int
    views: int = Field(default=0, ge=0)
