"""API router for the authenticated user's profile."""

from typing import Optional

from fastapi import APIRouter, Depends

from bookmarker.application.services.user_service import UserService
from bookmarker.core.dependencies import get_user_service
from bookmarker.domain.models import User
from bookmarker.presentation.api.dependencies import get_current_user
from bookmarker.presentation.api.schemas.user_schemas import EditUserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Get current user profile."""
    return UserResponse.model_validate(user_service.get_profile(user.id))


@router.patch("", response_model=UserResponse)
async def edit_user(
    request: Optional[EditUserRequest] = None,
    user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update first and/or last name of the current user."""
    changes = request.model_dump(exclude_unset=True) if request else {}
    updated = user_service.edit_profile(user.id, changes)
    return UserResponse.model_validate(updated)
