# Routes module
from .auth import router as auth_router
from .users import router as users_router
from .articles import router as articles_router
from .saved_articles import router as saved_articles_router

__all__ = ["auth_router", "users_router", "articles_router", "saved_articles_router"]
