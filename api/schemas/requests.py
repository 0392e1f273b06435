"""Request schemas for API endpoints."""
from typing import List, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from database.models import Category


class CamelModel(BaseModel):
    """Base schema accepting camelCase or snake_case keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RegisterRequest(CamelModel):
    """Request schema for user registration."""
    username: str = Field(..., min_length=1, max_length=50, description="Unique login name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=1, description="Plaintext password")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")


class LoginRequest(CamelModel):
    """Request schema for login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateProfileRequest(CamelModel):
    """Partial profile update; omitted fields keep their values."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    preferences: Optional[List[str]] = None

    @field_validator('preferences')
    @classmethod
    def validate_preferences(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Validate that every preference names a known category."""
        if v is None:
            return v
        known = {category.value for category in Category}
        unknown = [p for p in v if p not in known]
        if unknown:
            raise ValueError(f"Unknown categories: {', '.join(unknown)}")
        return v


class SaveArticleRequest(CamelModel):
    """Request schema for bookmarking an article."""
    article_id: int = Field(..., ge=1, description="Id of the article to save")
