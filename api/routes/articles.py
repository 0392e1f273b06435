"""Article browsing routes."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_current_user_id, get_storage
from api.schemas.responses import (
    ArticleListResponse,
    ArticleOut,
    ArticleResponse,
    CategoryListResponse,
)
from database.models import TRENDING, Category
from database.repositories import Storage
from shared.config import settings


router = APIRouter(prefix="/api", tags=["articles"])


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories():
    """Categories in navigation order, trending first."""
    return CategoryListResponse(
        categories=[TRENDING] + [category.value for category in Category]
    )


@router.get(
    "/articles",
    response_model=ArticleListResponse,
    response_model_exclude_unset=True
)
async def list_articles(
    category: Optional[str] = None,
    search: Optional[str] = None,
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    offset: int = Query(default=0, ge=0),
    user_id: Optional[int] = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage)
):
    """
    List articles.

    - `search` takes precedence over `category`
    - `category=trending` orders every article by views
    - Signed-in callers get an `isSaved` flag on each article
    """
    if search:
        articles = await storage.search_articles(search, limit, offset)
    elif category:
        articles = await storage.get_articles_by_category(category, limit, offset)
    else:
        articles = await storage.get_articles(limit, offset)

    result = []
    for article in articles:
        if user_id is None:
            result.append(ArticleOut(**article.model_dump()))
        else:
            is_saved = await storage.is_article_saved(user_id, article.id)
            result.append(ArticleOut(**article.model_dump(), is_saved=is_saved))

    return ArticleListResponse(articles=result)


@router.get("/articles/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    user_id: Optional[int] = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage)
):
    """Get one article. Every fetch counts as a view."""
    article = await storage.get_article(article_id)

    if not article:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found"
        )

    await storage.update_article_views(article_id)
    article.views += 1

    is_saved = False
    if user_id is not None:
        is_saved = await storage.is_article_saved(user_id, article_id)

    return ArticleResponse(article=ArticleOut(**article.model_dump(), is_saved=is_saved))
