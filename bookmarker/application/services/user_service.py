from __future__ import annotations

import logging
from typing import Any, Dict

from ...domain.errors import NotFoundError
from ...domain.models import User
from ...domain.ports.persistence import UserRepository

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("first_name", "last_name")


class UserService:
    """Reads and edits the profile of the authenticated user."""

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("Resource not found!")
        return user

    def edit_profile(self, user_id: int, changes: Dict[str, Any]) -> User:
        fields = {
            key: value
            for key, value in changes.items()
            if key in _PROFILE_FIELDS and value is not None
        }
        if not fields:
            return self.get_profile(user_id)
        try:
            user = self._users.update_user_profile(user_id, **fields)
        except ValueError as exc:
            raise NotFoundError("Resource not found!") from exc
        logger.info("Profile updated for user %s", user_id)
        return user
