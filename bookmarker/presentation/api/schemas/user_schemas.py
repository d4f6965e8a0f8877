"""Pydantic schemas for user API endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class UserResponse(CamelModel):
    """Public projection of a user; never carries the password hash."""

    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    is_email_verified: bool
    created_at: datetime
    updated_at: datetime


class EditUserRequest(CamelModel):
    """Request schema for a partial profile update."""

    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
