"""Shared utility functions."""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional


def generate_session_token() -> str:
    """Generate an opaque, unguessable session token."""
    return secrets.token_urlsafe(32)


def get_utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def hours_ago(hours: int, now: Optional[datetime] = None) -> datetime:
    """Return the UTC datetime `hours` before `now`."""
    return (now or get_utc_now()) - timedelta(hours=hours)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Collapse empty strings to None."""
    if not value:
        return None
    return value


def paginate(items: list, limit: int, offset: int) -> list:
    """Slice a sorted list into a single page."""
    offset = max(offset, 0)
    limit = max(limit, 0)
    return items[offset:offset + limit]
