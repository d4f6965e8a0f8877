"""Domain models for the Bookmarker application."""

from .bookmark import Bookmark
from .user import User

__all__ = [
    "Bookmark",
    "User",
]
