"""User profile routes."""
import logging
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_storage, require_user_id
from api.schemas.requests import UpdateProfileRequest
from api.schemas.responses import UserPublic, UserResponse
from database.repositories import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["user"])


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: int = Depends(require_user_id),
    storage: Storage = Depends(get_storage)
):
    """Update name, email or category preferences of the signed-in user."""
    updates = request.model_dump(exclude_unset=True, exclude_none=True)

    async with storage.transaction():
        if "email" in updates:
            owner = await storage.get_user_by_email(updates["email"])
            if owner is not None and owner.id != user_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Email already in use"
                )

        user = await storage.update_user(user_id, updates)

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    logger.info(f"Updated profile of user {user_id}: {sorted(updates)}")
    return UserResponse(user=UserPublic.from_user(user))
