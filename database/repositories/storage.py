"""Storage contract shared by every backing store."""
from abc import ABC, abstractmethod
from typing import Any, AsyncContextManager, Dict, List, Optional

from database.models import (
    Article,
    ArticleCreate,
    SavedArticle,
    SavedArticleWithArticle,
    User,
    UserCreate,
)


class Storage(ABC):
    """
    Data access contract for users, articles and saved articles.

    Lookups return None (or False) for missing records instead of raising.
    Uniqueness of usernames, emails and saved pairs is checked by callers;
    wrap the check and the write in `transaction()` to keep it atomic.
    """

    # User operations

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User:
        """Store a new user with empty preferences."""
        ...

    @abstractmethod
    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        """Shallow-merge `updates` into the user. None if the user does not exist."""
        ...

    # Article operations

    @abstractmethod
    async def get_articles(self, limit: int = 20, offset: int = 0) -> List[Article]:
        """Newest articles first."""
        ...

    @abstractmethod
    async def get_articles_by_category(
        self,
        category: str,
        limit: int = 20,
        offset: int = 0
    ) -> List[Article]:
        """Articles in a category, newest first; "trending" means all by views."""
        ...

    @abstractmethod
    async def search_articles(self, query: str, limit: int = 20, offset: int = 0) -> List[Article]:
        """Case-insensitive substring match on title, summary or source."""
        ...

    @abstractmethod
    async def get_article(self, article_id: int) -> Optional[Article]:
        ...

    @abstractmethod
    async def create_article(self, data: ArticleCreate) -> Article:
        ...

    @abstractmethod
    async def update_article_views(self, article_id: int) -> None:
        """Add one view. Unknown ids are ignored."""
        ...

    # Saved article operations

    @abstractmethod
    async def get_saved_articles(self, user_id: int) -> List[SavedArticleWithArticle]:
        """A user's bookmarks joined with their articles, most recent first."""
        ...

    @abstractmethod
    async def save_article(self, user_id: int, article_id: int) -> SavedArticle:
        """Bookmark an article, replacing any existing bookmark for the pair."""
        ...

    @abstractmethod
    async def unsave_article(self, user_id: int, article_id: int) -> bool:
        ...

    @abstractmethod
    async def is_article_saved(self, user_id: int, article_id: int) -> bool:
        ...

    @abstractmethod
    def transaction(self) -> AsyncContextManager[None]:
        """Serialize a caller's check-then-write sequence against other writers."""
        ...
