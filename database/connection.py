"""Storage construction and shared Redis connection."""
import logging
from typing import Optional
import redis.asyncio as redis

from database.repositories import MemoryStorage, Storage
from shared.config import settings

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """Manages the Redis connection used by the session store."""

    _redis_client: Optional[redis.Redis] = None

    @classmethod
    async def init_redis(cls) -> redis.Redis:
        """Initialize Redis connection."""
        if cls._redis_client is None:
            cls._redis_client = redis.from_url(
                settings.redis_url,
                decode_responses=True
            )
            logger.info("Redis client created")
        return cls._redis_client

    @classmethod
    async def close_connections(cls):
        """Close all connections."""
        if cls._redis_client:
            await cls._redis_client.aclose()
            cls._redis_client = None


def create_storage() -> Storage:
    """Build a fresh in-memory store, seeded according to settings."""
    return MemoryStorage(seed=settings.seed_articles)
