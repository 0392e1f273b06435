"""In-memory storage backed by plain dicts."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

from database.models import (
    TRENDING,
    Article,
    ArticleCreate,
    SavedArticle,
    SavedArticleWithArticle,
    User,
    UserCreate,
)
from database.repositories.seed import build_seed_articles
from database.repositories.storage import Storage
from shared.utils import blank_to_none, get_utc_now, paginate

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """
    Process-local, non-persistent implementation of `Storage`.

    Records are keyed by id; saved articles are keyed by (user_id, article_id).
    Email and username lookups are linear scans. None of the methods suspend,
    so each call is atomic on a single event loop.
    """

    def __init__(self, seed: bool = False):
        self._users: Dict[int, User] = {}
        self._articles: Dict[int, Article] = {}
        self._saved: Dict[Tuple[int, int], SavedArticle] = {}
        self._next_user_id = 1
        self._next_article_id = 1
        self._next_saved_id = 1
        self._lock = asyncio.Lock()

        if seed:
            self._seed_articles()

    def _seed_articles(self):
        for data, views in build_seed_articles():
            article = self._insert_article(data)
            article.views = views
        logger.info(f"Seeded {len(self._articles)} articles")

    def _insert_article(self, data: ArticleCreate) -> Article:
        article_id = self._next_article_id
        self._next_article_id += 1

        article = Article(
            **data.model_dump(),
            id=article_id,
            views=0
        )
        article.content = blank_to_none(article.content)
        article.url = blank_to_none(article.url)
        article.image_url = blank_to_none(article.image_url)

        self._articles[article_id] = article
        return article

    @staticmethod
    def _by_newest(articles) -> List[Article]:
        return sorted(articles, key=lambda a: a.published_at, reverse=True)

    @staticmethod
    def _copies(records) -> list:
        return [record.model_copy(deep=True) for record in records]

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            yield

    # User operations

    async def get_user(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return user.model_copy(deep=True) if user else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        for user in self._users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user.model_copy(deep=True)
        return None

    async def create_user(self, data: UserCreate) -> User:
        user_id = self._next_user_id
        self._next_user_id += 1

        user = User(
            **data.model_dump(),
            id=user_id,
            preferences=[],
            created_at=get_utc_now()
        )
        self._users[user_id] = user
        return user.model_copy(deep=True)

    async def update_user(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        user = self._users.get(user_id)
        if user is None:
            return None

        # id is the primary key and never changes
        changes = {
            field: value for field, value in updates.items()
            if field in User.model_fields and field != "id"
        }
        updated = user.model_copy(update=changes, deep=True)
        self._users[user_id] = updated
        return updated.model_copy(deep=True)

    # Article operations

    async def get_articles(self, limit: int = 20, offset: int = 0) -> List[Article]:
        articles = self._by_newest(self._articles.values())
        return self._copies(paginate(articles, limit, offset))

    async def get_articles_by_category(
        self,
        category: str,
        limit: int = 20,
        offset: int = 0
    ) -> List[Article]:
        if category == TRENDING:
            articles = sorted(self._articles.values(), key=lambda a: a.views, reverse=True)
        else:
            articles = self._by_newest(
                a for a in self._articles.values() if a.category == category
            )
        return self._copies(paginate(articles, limit, offset))

    async def search_articles(self, query: str, limit: int = 20, offset: int = 0) -> List[Article]:
        term = query.lower()
        matches = [
            article for article in self._articles.values()
            if term in article.title.lower()
            or term in article.summary.lower()
            or term in article.source.lower()
        ]
        return self._copies(paginate(self._by_newest(matches), limit, offset))

    async def get_article(self, article_id: int) -> Optional[Article]:
        article = self._articles.get(article_id)
        return article.model_copy(deep=True) if article else None

    async def create_article(self, data: ArticleCreate) -> Article:
        return self._insert_article(data).model_copy(deep=True)

    async def update_article_views(self, article_id: int) -> None:
        article = self._articles.get(article_id)
        if article is not None:
            article.views += 1

    # Saved article operations

    async def get_saved_articles(self, user_id: int) -> List[SavedArticleWithArticle]:
        joined = []
        for saved in self._saved.values():
            if saved.user_id != user_id:
                continue
            article = self._articles.get(saved.article_id)
            if article is None:
                continue
            joined.append(SavedArticleWithArticle(
                **saved.model_dump(),
                article=article.model_copy(deep=True)
            ))

        return sorted(joined, key=lambda s: (s.saved_at, s.id), reverse=True)

    async def save_article(self, user_id: int, article_id: int) -> SavedArticle:
        saved_id = self._next_saved_id
        self._next_saved_id += 1

        saved = SavedArticle(
            id=saved_id,
            user_id=user_id,
            article_id=article_id,
            saved_at=get_utc_now()
        )
        self._saved[(user_id, article_id)] = saved
        return saved.model_copy()

    async def unsave_article(self, user_id: int, article_id: int) -> bool:
        return self._saved.pop((user_id, article_id), None) is not None

    async def is_article_saved(self, user_id: int, article_id: int) -> bool:
        return (user_id, article_id) in self._saved
