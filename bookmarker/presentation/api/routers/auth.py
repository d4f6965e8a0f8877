from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ....application.services.auth_service import AuthService
from ....core.dependencies import get_auth_service
from ...api.schemas.auth import AuthRequest, MessageResponse, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    payload: AuthRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    result = await auth_service.signup(payload.email, payload.password)
    return MessageResponse(**result)


@router.get("/verify-email", response_model=MessageResponse)
async def verify_email(
    token: Optional[str] = Query(default=None),
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    result = await auth_service.verify_email(token)
    return MessageResponse(**result)


@router.post("/login", response_model=TokenResponse, status_code=status.HTTP_200_OK)
async def login(
    payload: AuthRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    result = await auth_service.login(payload.email, payload.password)
    return TokenResponse(access_token=result["access_token"])
