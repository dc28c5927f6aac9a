from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class CreateUserRequest(CamelModel):
    """DTO for user creation request"""
    email: str = Field(min_length=3, max_length=254, examples=["john@example.com"])
    name: str = Field(min_length=2, max_length=100, examples=["John Doe"])
    password: str = Field(min_length=8, max_length=128, examples=["SecurePass123"])


class UpdateUserRequest(CamelModel):
    """DTO for partial user update; omitted fields are left untouched"""
    email: Optional[str] = Field(default=None, min_length=3, max_length=254)
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    password: Optional[str] = Field(default=None, min_length=8, max_length=128)


class UserBatchRequest(CamelModel):
    """DTO for fetching several users at once"""
    ids: List[str] = Field(default_factory=list, max_length=100)


class UserResponse(CamelModel):
    """DTO for user response (no password)"""
    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserListResponse(CamelModel):
    """DTO for a page of users"""
    users: List[UserResponse]
