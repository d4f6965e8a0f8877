"""Pydantic schemas for the authentication endpoints."""

from pydantic import EmailStr, Field

from .base import CamelModel


class AuthRequest(CamelModel):
    """Request schema shared by signup and login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class MessageResponse(CamelModel):
    message: str


class TokenResponse(CamelModel):
    """Response schema carrying the bearer token."""

    access_token: str
