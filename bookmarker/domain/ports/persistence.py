from __future__ import annotations

from typing import List, Optional, Protocol

from ..models import Bookmark, User


class UserRepository(Protocol):
    """Persistence functions related to user accounts."""

    def create_user(
        self,
        email: str,
        password_hash: str,
        email_verification_token: Optional[str],
    ) -> User:
        """Insert a user; raises ``ConflictError`` when the email is taken."""
        ...

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    def get_user_by_verification_token(self, token: str) -> Optional[User]:
        ...

    def mark_email_verified(self, user_id: int) -> bool:
        """Flip the verified flag and clear the token; False if no row changed."""
        ...

    def update_user_profile(
        self,
        user_id: int,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        ...


class BookmarkRepository(Protocol):
    """Persistence functions related to bookmark records."""

    def create_bookmark(
        self,
        user_id: int,
        title: str,
        link: str,
        description: Optional[str],
    ) -> Bookmark:
        ...

    def get_bookmark(self, bookmark_id: int) -> Optional[Bookmark]:
        ...

    def get_bookmarks_for_user(self, user_id: int) -> List[Bookmark]:
        ...

    def update_bookmark(
        self,
        bookmark_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        link: Optional[str] = None,
    ) -> Bookmark:
        ...

    def delete_bookmark(self, bookmark_id: int) -> None:
        ...


class PersistenceGateway(
    UserRepository,
    BookmarkRepository,
    Protocol,
):
    """Composite gateway combining every persistence concern used by the app."""

    pass
