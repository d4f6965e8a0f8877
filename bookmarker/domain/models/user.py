"""User domain model for account registration and authentication."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    """
    User account owning a set of bookmarks.

    Attributes:
        id: Unique identifier
        email: Normalised email address (unique)
        password_hash: Argon2 hash of the password
        is_email_verified: Whether the email verification token was consumed
        email_verification_token: Pending 6-digit verification token, if any
        first_name: Optional given name
        last_name: Optional family name
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    id: int
    email: str
    password_hash: str
    is_email_verified: bool
    email_verification_token: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    created_at: datetime
    updated_at: datetime

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} verified={self.is_email_verified}>"
