"""Authentication routes: register, login, logout and current user."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.concurrency import run_in_threadpool

from api.dependencies import get_session_token, get_sessions, get_storage, require_user_id
from api.schemas.requests import LoginRequest, RegisterRequest
from api.schemas.responses import MessageResponse, UserPublic, UserResponse
from api.services.security import hash_password, verify_password
from api.services.sessions import SessionError, SessionStore
from database.models import UserCreate
from database.repositories import Storage
from shared.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def start_session(response: Response, sessions: SessionStore, user_id: int):
    """Create a session for the user and hand its token to the client."""
    try:
        token = await sessions.create(user_id)
    except SessionError as e:
        logger.error(f"Could not create session for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create session"
        )

    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax"
    )


@router.post("/register", response_model=UserResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions)
):
    """
    Register a new user.

    - Rejects an email or username that is already taken
    - Stores a bcrypt hash of the password
    - Signs the new user in
    """
    hashed = await run_in_threadpool(hash_password, request.password)

    async with storage.transaction():
        if await storage.get_user_by_email(request.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already exists with this email"
            )

        if await storage.get_user_by_username(request.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username already taken"
            )

        user = await storage.create_user(UserCreate(
            username=request.username,
            email=request.email,
            password=hashed,
            name=request.name
        ))

    await start_session(response, sessions, user.id)
    logger.info(f"Registered user {user.id} ({user.username})")

    return UserResponse(user=UserPublic.from_user(user))


@router.post("/login", response_model=UserResponse)
async def login(
    request: LoginRequest,
    response: Response,
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions)
):
    """Sign in with email and password."""
    user = await storage.get_user_by_email(request.email)

    valid = user is not None and await run_in_threadpool(
        verify_password, request.password, user.password
    )
    if not valid:
        logger.warning(f"Failed login attempt for {request.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    await start_session(response, sessions, user.id)
    logger.info(f"User {user.id} logged in")

    return UserResponse(user=UserPublic.from_user(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions)
):
    """End the caller's session, if there is one."""
    if token:
        try:
            await sessions.destroy(token)
        except SessionError as e:
            logger.error(f"Logout failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Logout failed"
            )

    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=UserResponse)
async def read_current_user(
    user_id: int = Depends(require_user_id),
    token: Optional[str] = Depends(get_session_token),
    storage: Storage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions)
):
    """Return the signed-in user. A session for a vanished user is discarded."""
    user = await storage.get_user(user_id)

    if user is None:
        try:
            await sessions.destroy(token)
        except SessionError as e:
            logger.error(f"Could not discard stale session: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"set-cookie": f"{settings.session_cookie_name}=; Max-Age=0; Path=/"}
        )

    return UserResponse(user=UserPublic.from_user(user))
