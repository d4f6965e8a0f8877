from __future__ import annotations

import asyncio
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from ...domain.errors import ForbiddenError, UnauthorizedError, ValidationError
from ...domain.models import User
from ...domain.ports.persistence import UserRepository
from ...services.email_service import EmailService

logger = logging.getLogger(__name__)


class AuthService:
    """Handles signup, email verification, login and bearer tokens."""

    def __init__(
        self,
        users: UserRepository,
        email_service: EmailService,
        secret_key: str,
        token_exp_minutes: int = 60,
        algorithm: str = "HS256",
        base_url: str = "http://localhost:3000",
    ) -> None:
        if not secret_key:
            raise RuntimeError("JWT_SECRET is not configured.")
        if secret_key == "change-me":
            logger.warning("JWT_SECRET is using the default value. Configure a real secret in production.")
        self._users = users
        self._email = email_service
        self._secret_key = secret_key
        self._token_exp_minutes = token_exp_minutes
        self._algorithm = algorithm
        self._base_url = base_url
        self._pwd = CryptContext(schemes=["argon2"], deprecated="auto")

    # ------------------------------------------------------------------
    async def signup(self, email: str, password: str) -> Dict[str, str]:
        email_clean = email.strip().lower()
        if not email_clean:
            raise ValidationError("email should not be empty")
        if not password:
            raise ValidationError("password should not be empty")

        hashed = await asyncio.to_thread(self._pwd.hash, password)
        token = self._generate_verification_token()
        user = self._users.create_user(
            email=email_clean,
            password_hash=hashed,
            email_verification_token=token,
        )
        logger.info("User %s registered as %s", user.id, user.email)

        sent = await asyncio.to_thread(
            self._email.send_verification_email, user.email, token, self._base_url
        )
        if not sent:
            logger.warning("Verification email for user %s was not delivered", user.id)
        return {"message": "User created successfully!"}

    async def verify_email(self, token: Optional[str]) -> Dict[str, str]:
        if not token or not token.strip():
            raise ForbiddenError("Invalid Token!")
        user = self._users.get_user_by_verification_token(token.strip())
        if not user:
            raise ForbiddenError("Invalid Token!")
        if not self._users.mark_email_verified(user.id):
            raise ForbiddenError("Can not verify email!")
        logger.info("Email verified for user %s", user.id)
        return {"message": "Email is verified!"}

    async def login(self, email: str, password: str) -> Dict[str, str]:
        user = self._users.get_user_by_email(email.strip().lower())
        if not user:
            raise ForbiddenError("Credentials incorrect")
        if not user.is_email_verified:
            raise ForbiddenError("Need to verify email")
        if not await asyncio.to_thread(self._pwd.verify, password, user.password_hash):
            logger.warning("Failed login for user %s", user.id)
            raise ForbiddenError("Credentials incorrect")
        return self.sign_token(user.id, user.email)

    def sign_token(self, user_id: int, email: str) -> Dict[str, str]:
        now = datetime.now(tz=timezone.utc)
        expire = now + timedelta(minutes=self._token_exp_minutes)
        payload = {"sub": str(user_id), "email": email, "iat": now, "exp": expire}
        return {"access_token": jwt.encode(payload, self._secret_key, algorithm=self._algorithm)}

    def authenticate_token(self, token: str) -> User:
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            raise UnauthorizedError("Unauthorized") from exc
        try:
            user_id = int(payload.get("sub"))
        except (TypeError, ValueError) as exc:
            raise UnauthorizedError("Unauthorized") from exc
        user = self._users.get_user_by_id(user_id)
        if not user:
            raise UnauthorizedError("Unauthorized")
        return user

    @staticmethod
    def _generate_verification_token() -> str:
        return str(100000 + secrets.randbelow(900000))
