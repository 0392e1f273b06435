"""Initial articles loaded into a fresh store."""
from datetime import datetime
from typing import List, Optional

from database.models import ArticleCreate, Category
from shared.utils import hours_ago

IMAGE_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h=400"

# (title, summary, source, category, image id, url, hours old, views)
SEED_ARTICLES = [
    (
        "Breakthrough in Quantum Computing Could Revolutionize Cybersecurity",
        "Scientists at MIT have announced a major breakthrough in quantum computing that could "
        "fundamentally change how we approach cybersecurity. The new quantum processor demonstrates "
        "unprecedented stability and error correction capabilities.",
        "TechCrunch",
        Category.TECHNOLOGY,
        "photo-1518709268805-4e9042af2176",
        "https://techcrunch.com/quantum-breakthrough",
        2,
        2300,
    ),
    (
        "Global Climate Summit Reaches Historic Agreement",
        "World leaders have reached a unanimous agreement on new climate policies that could "
        "significantly impact global carbon emissions.",
        "BBC News",
        Category.POLITICS,
        "photo-1569163139394-de4e4f43e4e5",
        "https://bbc.com/climate-summit",
        4,
        1850,
    ),
    (
        "Championship Final Breaks Viewership Records",
        "Last night's championship game drew the largest television audience in sports history, "
        "with over 120 million viewers worldwide.",
        "ESPN",
        Category.SPORTS,
        "photo-1551698618-1dfe5d97d256",
        "https://espn.com/championship-record",
        6,
        5200,
    ),
    (
        "Markets Surge Following Economic Report",
        "Major stock indices reached new highs after the latest economic indicators showed "
        "stronger than expected growth.",
        "Wall Street Journal",
        Category.BUSINESS,
        "photo-1611974789855-9c2a0a7236a3",
        "https://wsj.com/markets-surge",
        8,
        3100,
    ),
    (
        "New Study Reveals Promising Treatment Results",
        "Clinical trials for a new treatment show remarkable success rates, offering hope for "
        "patients with previously untreatable conditions.",
        "Medical News Today",
        Category.HEALTH,
        "photo-1582719471384-894fbb16e074",
        "https://medicalnews.com/new-treatment",
        10,
        1650,
    ),
    (
        "Blockbuster Film Breaks Opening Weekend Records",
        "The highly anticipated sequel dominated box offices worldwide, earning over $300 million "
        "in its opening weekend.",
        "Entertainment Weekly",
        Category.ENTERTAINMENT,
        "photo-1489599894617-e40116ceb684",
        "https://ew.com/blockbuster-record",
        12,
        4750,
    ),
]


def build_seed_articles(now: Optional[datetime] = None) -> List[tuple[ArticleCreate, int]]:
    """Return (article data, view count) pairs relative to `now`."""
    seeded = []
    for title, summary, source, category, image, url, age, views in SEED_ARTICLES:
        data = ArticleCreate(
            title=title,
            summary=summary,
            content="Full article content here...",
            source=source,
            category=category.value,
            image_url=f"https://images.unsplash.com/{image}{IMAGE_PARAMS}",
            url=url,
            published_at=hours_ago(age, now),
        )
        seeded.append((data, views))
    return seeded
