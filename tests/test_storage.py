"""In-memory storage tests."""
import pytest
from datetime import datetime, timedelta, timezone

from database.models import TRENDING, Category, UserCreate
from database.repositories import MemoryStorage


def new_user(**overrides) -> UserCreate:
    data = {
        "username": "reader",
        "email": "reader@example.com",
        "password": "hashed-value",
        "name": "Avid Reader"
    }
    data.update(overrides)
    return UserCreate(**data)


class TestUserOperations:
    """Tests for user lookups, creation and updates."""

    @pytest.mark.asyncio
    async def test_create_user_assigns_sequential_ids(self, storage):
        """Test ids start at 1 and increase by one."""
        first = await storage.create_user(new_user())
        second = await storage.create_user(new_user(username="other", email="other@example.com"))

        assert first.id == 1
        assert second.id == 2

    @pytest.mark.asyncio
    async def test_create_user_defaults(self, storage):
        """Test new users get empty preferences and a creation time."""
        before = datetime.now(timezone.utc)
        user = await storage.create_user(new_user())

        assert user.preferences == []
        assert user.created_at >= before
        assert user.password == "hashed-value"

    @pytest.mark.asyncio
    async def test_lookups(self, storage):
        """Test lookups by id, email and username."""
        user = await storage.create_user(new_user())

        assert (await storage.get_user(user.id)).username == "reader"
        assert (await storage.get_user_by_email("reader@example.com")).id == user.id
        assert (await storage.get_user_by_username("reader")).id == user.id

    @pytest.mark.asyncio
    async def test_lookups_missing_return_none(self, storage):
        """Test lookups for unknown users return None."""
        assert await storage.get_user(42) is None
        assert await storage.get_user_by_email("nobody@example.com") is None
        assert await storage.get_user_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_lookups_are_case_sensitive(self, storage):
        """Test email and username matching is exact."""
        await storage.create_user(new_user())

        assert await storage.get_user_by_email("Reader@Example.com") is None
        assert await storage.get_user_by_username("READER") is None

    @pytest.mark.asyncio
    async def test_update_user_merges_fields(self, storage):
        """Test omitted fields keep their values."""
        user = await storage.create_user(new_user())

        updated = await storage.update_user(user.id, {"name": "New Name", "preferences": ["sports"]})

        assert updated.name == "New Name"
        assert updated.preferences == ["sports"]
        assert updated.email == "reader@example.com"
        assert (await storage.get_user(user.id)).name == "New Name"

    @pytest.mark.asyncio
    async def test_update_user_keeps_id(self, storage):
        """Test the primary key cannot be overwritten."""
        user = await storage.create_user(new_user())

        updated = await storage.update_user(user.id, {"id": 99})

        assert updated.id == user.id
        assert await storage.get_user(99) is None

    @pytest.mark.asyncio
    async def test_update_missing_user(self, storage):
        """Test updating an unknown user returns None."""
        assert await storage.update_user(7, {"name": "Ghost"}) is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, storage):
        """Test mutating a returned record does not change stored state."""
        user = await storage.create_user(new_user())
        user.preferences.append("health")

        assert (await storage.get_user(user.id)).preferences == []


class TestArticleOperations:
    """Tests for article listing, search and views."""

    @pytest.mark.asyncio
    async def test_create_article_round_trip(self, storage, article_factory):
        """Test a created article reads back unchanged."""
        data = article_factory()
        created = await storage.create_article(data)
        fetched = await storage.get_article(created.id)

        assert created.id == 1
        assert created.views == 0
        assert fetched == created
        assert fetched.model_dump(exclude={"id", "views"}) == data.model_dump()

    @pytest.mark.asyncio
    async def test_naive_published_at_is_utc(self, seeded_storage, article_factory):
        """Test a naive timestamp is stored as UTC and sorts with seeded articles."""
        created = await seeded_storage.create_article(
            article_factory(title="Naive", published_at=datetime(2024, 1, 1))
        )

        articles = await seeded_storage.get_articles()
        matches = await seeded_storage.search_articles("naive")
        in_category = await seeded_storage.get_articles_by_category("technology")

        assert created.published_at == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert articles[-1].id == created.id
        assert [a.id for a in matches] == [created.id]
        assert in_category[-1].id == created.id
        assert await seeded_storage.get_article(created.id) == created

    @pytest.mark.asyncio
    async def test_create_article_normalizes_optional_fields(self, storage, article_factory):
        """Test missing or empty optional fields become None."""
        article = await storage.create_article(article_factory(content="", url=None, image_url=""))

        assert article.content is None
        assert article.url is None
        assert article.image_url is None

    @pytest.mark.asyncio
    async def test_get_article_missing(self, storage):
        """Test unknown ids return None."""
        assert await storage.get_article(123) is None

    @pytest.mark.asyncio
    async def test_get_articles_newest_first(self, storage, article_factory):
        """Test articles are ordered by publication time descending."""
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for hours in (1, 3, 2):
            await storage.create_article(article_factory(
                title=f"Article {hours}",
                published_at=base + timedelta(hours=hours)
            ))

        articles = await storage.get_articles()

        assert [a.title for a in articles] == ["Article 3", "Article 2", "Article 1"]

    @pytest.mark.asyncio
    async def test_get_articles_pagination(self, storage, article_factory):
        """Test limit and offset slice the ordered list."""
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for hours in range(5):
            await storage.create_article(article_factory(
                title=f"Article {hours}",
                published_at=base + timedelta(hours=hours)
            ))

        page = await storage.get_articles(limit=2, offset=1)
        past_end = await storage.get_articles(limit=2, offset=10)

        assert [a.title for a in page] == ["Article 3", "Article 2"]
        assert past_end == []

    @pytest.mark.asyncio
    async def test_get_articles_default_limit(self, storage, article_factory):
        """Test at most 20 articles are returned by default."""
        for i in range(25):
            await storage.create_article(article_factory(title=f"Article {i}"))

        assert len(await storage.get_articles()) == 20

    @pytest.mark.asyncio
    async def test_category_filter(self, seeded_storage):
        """Test a category returns only its own articles."""
        articles = await seeded_storage.get_articles_by_category(Category.SPORTS.value)

        assert len(articles) == 1
        assert articles[0].source == "ESPN"

    @pytest.mark.asyncio
    async def test_unknown_category_is_empty(self, seeded_storage):
        """Test a category nothing belongs to returns an empty list."""
        assert await seeded_storage.get_articles_by_category("weather") == []

    @pytest.mark.asyncio
    async def test_trending_orders_by_views(self, seeded_storage):
        """Test trending returns every article by view count descending."""
        articles = await seeded_storage.get_articles_by_category(TRENDING)

        views = [a.views for a in articles]
        assert views == sorted(views, reverse=True)
        assert len(articles) == 6
        assert articles[0].source == "ESPN"

    @pytest.mark.asyncio
    async def test_trending_ties_are_deterministic(self, storage, article_factory):
        """Test articles with equal views keep a stable order."""
        for i in range(4):
            await storage.create_article(article_factory(title=f"Tied {i}"))

        first = await storage.get_articles_by_category(TRENDING)
        second = await storage.get_articles_by_category(TRENDING)

        assert [a.id for a in first] == [a.id for a in second]

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive(self, seeded_storage):
        """Test an upper-case query matches a lower-case title."""
        results = await seeded_storage.search_articles("QUANTUM")

        assert len(results) == 1
        assert "Quantum" in results[0].title

    @pytest.mark.asyncio
    async def test_search_matches_summary_and_source(self, storage, article_factory):
        """Test search looks at title, summary and source."""
        await storage.create_article(article_factory(title="Alpha", summary="contains needle"))
        await storage.create_article(article_factory(title="Beta", source="Needle Times"))
        await storage.create_article(article_factory(title="Gamma", content="needle only in content"))

        results = await storage.search_articles("needle")

        assert sorted(a.title for a in results) == ["Alpha", "Beta"]

    @pytest.mark.asyncio
    async def test_update_article_views(self, storage, article_factory):
        """Test each call adds exactly one view."""
        article = await storage.create_article(article_factory())

        await storage.update_article_views(article.id)
        await storage.update_article_views(article.id)

        assert (await storage.get_article(article.id)).views == 2

    @pytest.mark.asyncio
    async def test_update_views_missing_article(self, storage):
        """Test incrementing an unknown article is a no-op."""
        await storage.update_article_views(999)
        assert await storage.get_article(999) is None


class TestSavedArticleOperations:
    """Tests for bookmarks."""

    @pytest.mark.asyncio
    async def test_save_and_check(self, seeded_storage):
        """Test a saved pair is reported as saved."""
        saved = await seeded_storage.save_article(1, 2)

        assert saved.id == 1
        assert saved.user_id == 1
        assert saved.article_id == 2
        assert await seeded_storage.is_article_saved(1, 2)
        assert not await seeded_storage.is_article_saved(1, 3)
        assert not await seeded_storage.is_article_saved(2, 2)

    @pytest.mark.asyncio
    async def test_save_twice_overwrites(self, seeded_storage):
        """Test saving the same pair again leaves a single record."""
        first = await seeded_storage.save_article(1, 2)
        second = await seeded_storage.save_article(1, 2)

        saved = await seeded_storage.get_saved_articles(1)

        assert second.id == first.id + 1
        assert len(saved) == 1
        assert saved[0].id == second.id

    @pytest.mark.asyncio
    async def test_unsave(self, seeded_storage):
        """Test unsaving removes the pair once."""
        await seeded_storage.save_article(1, 2)

        assert await seeded_storage.unsave_article(1, 2) is True
        assert await seeded_storage.unsave_article(1, 2) is False
        assert not await seeded_storage.is_article_saved(1, 2)

    @pytest.mark.asyncio
    async def test_unsave_never_saved(self, storage):
        """Test unsaving an unknown pair returns False."""
        assert await storage.unsave_article(5, 5) is False

    @pytest.mark.asyncio
    async def test_saved_articles_joined_and_ordered(self, seeded_storage):
        """Test saved articles carry their article, most recent first."""
        await seeded_storage.save_article(1, 1)
        await seeded_storage.save_article(1, 3)
        await seeded_storage.save_article(2, 4)

        saved = await seeded_storage.get_saved_articles(1)

        assert [s.article_id for s in saved] == [3, 1]
        assert saved[0].article.id == 3
        assert saved[0].article.source == "ESPN"

    @pytest.mark.asyncio
    async def test_saved_articles_skip_missing_articles(self, seeded_storage):
        """Test bookmarks pointing at unknown articles are dropped."""
        await seeded_storage.save_article(1, 1)
        await seeded_storage.save_article(1, 404)

        saved = await seeded_storage.get_saved_articles(1)

        assert [s.article_id for s in saved] == [1]


class TestSeedData:
    """Tests for the initial article set."""

    def test_seed_loads_one_article_per_category(self):
        """Test every category has exactly one seeded article."""
        store = MemoryStorage(seed=True)
        categories = sorted(a.category for a in store._articles.values())

        assert categories == sorted(c.value for c in Category)

    @pytest.mark.asyncio
    async def test_seed_newest_first(self, seeded_storage):
        """Test the two-hour-old article leads the listing."""
        articles = await seeded_storage.get_articles()

        assert articles[0].source == "TechCrunch"
        assert articles[-1].source == "Entertainment Weekly"

    @pytest.mark.asyncio
    async def test_created_articles_continue_after_seed(self, seeded_storage, article_factory):
        """Test the article counter continues after seeding."""
        article = await seeded_storage.create_article(article_factory())
        assert article.id == 7
