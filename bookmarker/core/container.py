from dataclasses import dataclass

from ..application.services.auth_service import AuthService
from ..application.services.bookmark_service import BookmarkService
from ..application.services.user_service import UserService
from ..domain.ports.persistence import PersistenceGateway
from ..services.email_service import EmailService
from .config import Settings


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    persistence: PersistenceGateway
    email_service: EmailService
    auth_service: AuthService
    bookmark_service: BookmarkService
    user_service: UserService
