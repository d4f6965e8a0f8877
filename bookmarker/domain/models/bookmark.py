from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Bookmark:
    id: int
    user_id: int
    title: str
    description: Optional[str]
    link: str
    created_at: datetime
    updated_at: datetime
