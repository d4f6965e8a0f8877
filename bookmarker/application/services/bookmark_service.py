from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ...domain.errors import ForbiddenError, NotFoundError
from ...domain.models import Bookmark
from ...domain.ports.persistence import BookmarkRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("title", "description", "link")


class BookmarkService:
    """Bookmark CRUD restricted to the bookmark's owner."""

    def __init__(self, bookmarks: BookmarkRepository) -> None:
        self._bookmarks = bookmarks

    def create(
        self,
        owner_id: int,
        title: str,
        link: str,
        description: Optional[str] = None,
    ) -> Bookmark:
        bookmark = self._bookmarks.create_bookmark(
            user_id=owner_id,
            title=title,
            link=link,
            description=description,
        )
        logger.info("Bookmark %s created by user %s", bookmark.id, owner_id)
        return bookmark

    def list(self, owner_id: int) -> List[Bookmark]:
        return self._bookmarks.get_bookmarks_for_user(owner_id)

    def get_by_id(self, owner_id: int, bookmark_id: int) -> Bookmark:
        bookmark = self._bookmarks.get_bookmark(bookmark_id)
        if bookmark is None:
            raise NotFoundError("Resource not found!")
        if bookmark.user_id != owner_id:
            raise ForbiddenError("Access resource is denied!")
        return bookmark

    def update(self, owner_id: int, bookmark_id: int, changes: Dict[str, Any]) -> Bookmark:
        bookmark = self._require_owned(owner_id, bookmark_id)
        fields = {
            key: value
            for key, value in changes.items()
            if key in _EDITABLE_FIELDS and value is not None
        }
        if not fields:
            return bookmark
        updated = self._bookmarks.update_bookmark(bookmark.id, **fields)
        logger.info("Bookmark %s updated by user %s", bookmark.id, owner_id)
        return updated

    def delete(self, owner_id: int, bookmark_id: int) -> Bookmark:
        bookmark = self._require_owned(owner_id, bookmark_id)
        self._bookmarks.delete_bookmark(bookmark.id)
        logger.info("Bookmark %s deleted by user %s", bookmark.id, owner_id)
        return bookmark

    def _require_owned(self, owner_id: int, bookmark_id: int) -> Bookmark:
        # Missing and foreign bookmarks are indistinguishable to the caller.
        bookmark = self._bookmarks.get_bookmark(bookmark_id)
        if bookmark is None or bookmark.user_id != owner_id:
            raise ForbiddenError("Access to resource denied!")
        return bookmark
