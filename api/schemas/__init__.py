# Schemas module
from .requests import (
    LoginRequest,
    RegisterRequest,
    SaveArticleRequest,
    UpdateProfileRequest,
)
from .responses import (
    ArticleListResponse,
    ArticleOut,
    ArticleResponse,
    CategoryListResponse,
    MessageResponse,
    SavedArticleListResponse,
    SavedArticleResponse,
    UserPublic,
    UserResponse,
)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "SaveArticleRequest",
    "UpdateProfileRequest",
    "ArticleListResponse",
    "ArticleOut",
    "ArticleResponse",
    "CategoryListResponse",
    "MessageResponse",
    "SavedArticleListResponse",
    "SavedArticleResponse",
    "UserPublic",
    "UserResponse",
]
