"""FastAPI dependencies shared by the routers."""
import logging
from typing import Optional
from fastapi import Depends, HTTPException, Request, status

from api.services.sessions import SessionError, SessionStore
from database.repositories import Storage
from shared.config import settings

logger = logging.getLogger(__name__)


def get_storage(request: Request) -> Storage:
    """Storage instance the app was built with."""
    return request.app.state.storage


def get_sessions(request: Request) -> SessionStore:
    """Session store the app was built with."""
    return request.app.state.sessions


def get_session_token(request: Request) -> Optional[str]:
    """Session token presented by the client, if any."""
    return request.cookies.get(settings.session_cookie_name)


async def get_current_user_id(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions)
) -> Optional[int]:
    """User id for the caller's session, or None when anonymous."""
    if not token:
        return None
    try:
        return await sessions.get(token)
    except SessionError as e:
        logger.error(f"Session lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Session lookup failed"
        )


async def require_user_id(user_id: Optional[int] = Depends(get_current_user_id)) -> int:
    """User id for the caller's session; 401 when anonymous."""
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated"
        )
    return user_id
