from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...application.services.auth_service import AuthService
from ...core.dependencies import get_auth_service
from ...domain.errors import UnauthorizedError
from ...domain.models import User

_bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the bearer token into the calling user."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Unauthorized")
    return auth_service.authenticate_token(credentials.credentials)
