"""Pydantic DTOs for user profiles."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for registering a user profile."""

    username: str = Field(..., min_length=3, max_length=50, examples=["alice"])
    email: EmailStr = Field(..., examples=["alice@example.com"])


class UserResponse(BaseModel):
    """Public user profile returned to the client."""

    id: str
    username: str
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
