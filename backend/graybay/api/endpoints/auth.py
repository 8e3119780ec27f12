"""
Demo session endpoints.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from typing import Optional

from graybay.core.exceptions import AuthenticationError
from graybay.core.rate_limit import limiter, DEFAULT_LIMIT
from graybay.deps.di_container import get_container
from graybay.schemas.auth import LoginRequest, LoginResponse, UserInfo

router = APIRouter()

bearer_scheme = HTTPBearer(auto_error=False)


@router.post("/session", response_model=LoginResponse)
@limiter.limit(DEFAULT_LIMIT)
async def login(
    request: Request,
    credentials: LoginRequest,
) -> LoginResponse:
    """Exchange the demo credentials for a session token."""
    controller = get_container().auth_controller()
    return controller.login(credentials)


@router.get("/session", response_model=UserInfo)
async def get_session(
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserInfo:
    """Return the user behind the bearer token."""
    if authorization is None:
        raise AuthenticationError("Missing bearer token")
    controller = get_container().auth_controller()
    return controller.get_session_user(authorization.credentials)
