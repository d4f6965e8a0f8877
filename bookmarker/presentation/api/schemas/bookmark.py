from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CreateBookmarkRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    link: str = Field(..., min_length=1, max_length=2048)


class EditBookmarkRequest(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    link: Optional[str] = Field(default=None, min_length=1, max_length=2048)


class BookmarkResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: Optional[str] = None
    link: str
    created_at: datetime
    updated_at: datetime
