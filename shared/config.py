"""Shared configuration for the news service."""
from typing import Literal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "News Aggregator"

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    log_level: str = "INFO"

    # Redis Configuration (only used by the redis session backend)
    redis_url: str = "redis://localhost:6379"

    # Session Configuration
    session_backend: Literal["memory", "redis"] = "memory"
    session_cookie_name: str = "news_session"
    session_cookie_secure: bool = False
    session_key_prefix: str = "session"
    session_ttl: int = 7 * 24 * 60 * 60  # seconds

    # Password hashing
    bcrypt_rounds: int = 12

    # Storage
    seed_articles: bool = True

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
