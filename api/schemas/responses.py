"""Response schemas for API endpoints."""
from typing import List, Optional
from datetime import datetime
from pydantic import Field

from api.schemas.requests import CamelModel
from database.models import Article, SavedArticle, SavedArticleWithArticle, User


class UserPublic(CamelModel):
    """User as returned to clients, without the password hash."""
    id: int
    username: str
    email: str
    name: str
    preferences: List[str] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(**user.model_dump(exclude={"password"}))


class UserResponse(CamelModel):
    user: UserPublic


class ArticleOut(Article):
    """Article annotated with the caller's saved state."""
    is_saved: Optional[bool] = None


class ArticleListResponse(CamelModel):
    articles: List[ArticleOut] = Field(default_factory=list)


class ArticleResponse(CamelModel):
    article: ArticleOut


class SavedArticleListResponse(CamelModel):
    saved_articles: List[SavedArticleWithArticle] = Field(default_factory=list)


class SavedArticleResponse(CamelModel):
    saved_article: SavedArticle


class CategoryListResponse(CamelModel):
    categories: List[str]


class MessageResponse(CamelModel):
    message: str
