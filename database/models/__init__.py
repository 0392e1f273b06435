# Models module
from .article import Article, ArticleCreate, Category, TRENDING
from .user import User, UserCreate
from .saved_article import SavedArticle, SavedArticleWithArticle

__all__ = [
    "Article",
    "ArticleCreate",
    "Category",
    "TRENDING",
    "User",
    "UserCreate",
    "SavedArticle",
    "SavedArticleWithArticle",
]
