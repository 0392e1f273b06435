"""Saved article (bookmark) routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_storage, require_user_id
from api.schemas.requests import SaveArticleRequest
from api.schemas.responses import (
    MessageResponse,
    SavedArticleListResponse,
    SavedArticleResponse,
)
from database.repositories import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/saved-articles", tags=["saved-articles"])


@router.get("", response_model=SavedArticleListResponse)
async def list_saved_articles(
    user_id: int = Depends(require_user_id),
    storage: Storage = Depends(get_storage)
):
    """List the signed-in user's saved articles, most recent first."""
    saved = await storage.get_saved_articles(user_id)
    return SavedArticleListResponse(saved_articles=saved)


@router.post("", response_model=SavedArticleResponse)
async def save_article(
    request: SaveArticleRequest,
    user_id: int = Depends(require_user_id),
    storage: Storage = Depends(get_storage)
):
    """Bookmark an article for the signed-in user."""
    async with storage.transaction():
        article = await storage.get_article(request.article_id)
        if not article:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Article not found"
            )

        if await storage.is_article_saved(user_id, request.article_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Article already saved"
            )

        saved = await storage.save_article(user_id, request.article_id)

    logger.info(f"User {user_id} saved article {request.article_id}")
    return SavedArticleResponse(saved_article=saved)


@router.delete("/{article_id}", response_model=MessageResponse)
async def unsave_article(
    article_id: int,
    user_id: int = Depends(require_user_id),
    storage: Storage = Depends(get_storage)
):
    """Remove a bookmark."""
    removed = await storage.unsave_article(user_id, article_id)

    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Saved article not found"
        )

    logger.info(f"User {user_id} unsaved article {article_id}")
    return MessageResponse(message="Article unsaved successfully")
