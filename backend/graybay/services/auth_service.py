"""
Authentication service for the demo session.
A single configured demo user; there is no credential store.
"""

import secrets
from datetime import timedelta

from graybay.core.config import settings
from graybay.core.exceptions import AuthenticationError
from graybay.core.logging import get_logger
from graybay.core.security import create_access_token, decode_access_token
from graybay.schemas.auth import LoginRequest, LoginResponse, TokenResponse, UserInfo
from graybay.services.base_service import BaseService

logger = get_logger(__name__)


class AuthService(BaseService):
    """Service for authentication operations."""

    def _demo_user(self) -> UserInfo:
        return UserInfo(
            id=settings.DEMO_USER_ID,
            email=settings.DEMO_USER_EMAIL,
            name=settings.DEMO_USER_NAME,
        )

    def authenticate(self, credentials: LoginRequest) -> LoginResponse:
        """
        Check credentials against the demo user and issue a session token.

        Raises:
            AuthenticationError: If the email or password does not match
        """
        email_ok = secrets.compare_digest(credentials.email.lower(), settings.DEMO_USER_EMAIL.lower())
        password_ok = secrets.compare_digest(credentials.password, settings.DEMO_USER_PASSWORD)
        if not (email_ok and password_ok):
            logger.warning("Login rejected", extra={"email": credentials.email})
            raise AuthenticationError("Invalid email or password")

        user = self._demo_user()
        expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(
            data={"sub": user.id, "email": user.email, "name": user.name},
            expires_delta=expires,
        )
        logger.info("Login succeeded", extra={"user_id": user.id})
        return LoginResponse(
            token=TokenResponse(
                access_token=access_token,
                expires_in=int(expires.total_seconds()),
            ),
            user=user,
        )

    def get_current_user(self, token: str) -> UserInfo:
        """
        Resolve the user behind a session token.

        Raises:
            AuthenticationError: If the token is missing, expired or tampered with
        """
        payload = decode_access_token(token) if token else None
        if not payload or "sub" not in payload:
            raise AuthenticationError("Invalid or expired session token")
        return UserInfo(
            id=str(payload["sub"]),
            email=payload.get("email", ""),
            name=payload.get("name"),
        )
