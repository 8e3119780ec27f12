"""
Authentication schemas for the demo session.
"""

from pydantic import Field
from typing import Optional

from graybay.schemas.base import APIModel


class LoginRequest(APIModel):
    """Demo credentials."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(APIModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserInfo(APIModel):
    """Signed-in user."""
    id: str
    email: str
    name: Optional[str] = None


class LoginResponse(APIModel):
    """Login response with token and user info."""
    token: TokenResponse
    user: UserInfo
