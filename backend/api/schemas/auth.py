"""
Authentication request and response schemas.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)


class AdminUserResponse(BaseModel):
    """Admin user response schema. The password hash is never part of it."""

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    message: str
    user: AdminUserResponse


class MeResponse(BaseModel):
    user: AdminUserResponse


class MessageResponse(BaseModel):
    message: str
