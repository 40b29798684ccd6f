"""Authentication service with JWT and password hashing."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

import bcrypt
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.config import Settings
from confsite.models import AdminUser

logger = logging.getLogger(__name__)


class AuthService:
    """Service for token and password operations."""

    def __init__(self, settings: Settings):
        self.secret_key = settings.jwt_secret_key
        self.algorithm = settings.jwt_algorithm
        self.access_token_expire_minutes = settings.jwt_access_token_expire_minutes
        self.refresh_token_expire_days = settings.jwt_refresh_token_expire_days

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode(), salt).decode()

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())

    def _create_token(self, user_id: UUID, email: str, token_type: str, expires: timedelta) -> str:
        to_encode: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "type": token_type,
            "exp": datetime.now(timezone.utc) + expires,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def create_access_token(self, user_id: UUID, email: str) -> str:
        """Create a JWT access token."""
        return self._create_token(
            user_id, email, "access", timedelta(minutes=self.access_token_expire_minutes)
        )

    def create_refresh_token(self, user_id: UUID, email: str) -> str:
        """Create a JWT refresh token."""
        return self._create_token(
            user_id, email, "refresh", timedelta(days=self.refresh_token_expire_days)
        )

    def decode_token(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a JWT token."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            return None

    def verify_access_token(self, token: str) -> dict[str, Any] | None:
        """Verify an access token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "access":
            return payload
        return None

    def verify_refresh_token(self, token: str) -> dict[str, Any] | None:
        """Verify a refresh token and return the payload."""
        payload = self.decode_token(token)
        if payload and payload.get("type") == "refresh":
            return payload
        return None


class AdminAccountService:
    """Admin account management backed by the database."""

    def __init__(self, db: AsyncSession, auth: AuthService):
        self.db = db
        self.auth = auth

    async def get_by_email(self, email: str) -> AdminUser | None:
        result = await self.db.execute(
            select(AdminUser).where(AdminUser.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> AdminUser | None:
        """Return the user when the credentials are valid."""
        user = await self.get_by_email(email)
        if not user or not self.auth.verify_password(password, user.hashed_password):
            logger.warning(f"Failed login attempt for {email}")
            return None
        return user

    async def create(self, email: str, password: str) -> AdminUser:
        """Create a dashboard account."""
        if await self.get_by_email(email):
            raise ValueError("Email already registered")

        user = AdminUser(
            email=email.lower(),
            hashed_password=self.auth.hash_password(password),
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        logger.info(f"Created admin account {user.email}")
        return user

    async def change_password(
        self, user: AdminUser, current_password: str, new_password: str
    ) -> None:
        """Re-check the current password, then store the new one."""
        if not self.auth.verify_password(current_password, user.hashed_password):
            raise ValueError("The current password you entered is incorrect")

        user.hashed_password = self.auth.hash_password(new_password)
        await self.db.flush()
        logger.info(f"Password changed for {user.email}")
