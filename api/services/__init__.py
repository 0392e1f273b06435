# Services module
from .security import hash_password, verify_password
from .sessions import MemorySessionStore, RedisSessionStore, SessionError, SessionStore

__all__ = [
    "hash_password",
    "verify_password",
    "MemorySessionStore",
    "RedisSessionStore",
    "SessionError",
    "SessionStore",
]
