"""User model definitions."""
from typing import List
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class UserCreate(BaseModel):
    """Fields supplied when registering a user. `password` is already hashed."""
    username: str
    email: str
    password: str
    name: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class User(UserCreate):
    """User model for storage representation."""
    id: int
    preferences: List[str] = Field(default_factory=list)
    created_at: datetime
