"""Saved article model definitions."""
from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .article import Article


class SavedArticle(BaseModel):
    """Bookmark linking a user to an article."""
    id: int
    user_id: int
    article_id: int
    saved_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SavedArticleWithArticle(SavedArticle):
    """Saved article joined with the article it points at."""
    article: Article
