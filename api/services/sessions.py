"""Server-side session stores mapping opaque tokens to user ids."""
import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple
import redis.asyncio as redis
from redis.exceptions import RedisError

from shared.config import settings
from shared.utils import generate_session_token

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Raised when the session backend cannot be reached."""


class SessionStore(ABC):
    """Correlates a session token to the id of the signed-in user."""

    @abstractmethod
    async def create(self, user_id: int) -> str:
        """Start a session and return its token."""

    @abstractmethod
    async def get(self, token: str) -> Optional[int]:
        """Return the user id for a live session, or None."""

    @abstractmethod
    async def destroy(self, token: str) -> None:
        """End a session. Unknown tokens are ignored."""

    async def close(self) -> None:
        """Release backend resources."""


class MemorySessionStore(SessionStore):
    """Sessions kept in a dict; lost on restart."""

    def __init__(self, ttl: Optional[int] = None):
        self.ttl = ttl or settings.session_ttl
        self._sessions: Dict[str, Tuple[int, float]] = {}

    async def create(self, user_id: int) -> str:
        token = generate_session_token()
        self._sessions[token] = (user_id, time.monotonic() + self.ttl)
        return token

    async def get(self, token: str) -> Optional[int]:
        entry = self._sessions.get(token)
        if entry is None:
            return None

        user_id, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._sessions[token]
            return None
        return user_id

    async def destroy(self, token: str) -> None:
        self._sessions.pop(token, None)


class RedisSessionStore(SessionStore):
    """Sessions stored as expiring Redis keys."""

    def __init__(
        self,
        redis_client: redis.Redis,
        ttl: Optional[int] = None,
        prefix: Optional[str] = None
    ):
        self.redis = redis_client
        self.ttl = ttl or settings.session_ttl
        self.prefix = prefix or settings.session_key_prefix

    def _key(self, token: str) -> str:
        return f"{self.prefix}:{token}"

    async def create(self, user_id: int) -> str:
        token = generate_session_token()
        try:
            await self.redis.set(self._key(token), str(user_id), ex=self.ttl)
        except RedisError as e:
            raise SessionError(f"Failed to create session: {e}") from e
        return token

    async def get(self, token: str) -> Optional[int]:
        try:
            value = await self.redis.get(self._key(token))
        except RedisError as e:
            raise SessionError(f"Failed to read session: {e}") from e

        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Discarding malformed session value for key {self._key(token)}")
            return None

    async def destroy(self, token: str) -> None:
        try:
            await self.redis.delete(self._key(token))
        except RedisError as e:
            raise SessionError(f"Failed to destroy session: {e}") from e
