"""
Authentication controller.
"""

from graybay.controllers.base_controller import BaseController
from graybay.schemas.auth import LoginRequest, LoginResponse, UserInfo
from graybay.services.auth_service import AuthService


class AuthController(BaseController):
    """Controller for the demo session."""

    def __init__(self, auth_service: AuthService = None):
        self.auth_service = auth_service or AuthService()

    def login(self, credentials: LoginRequest) -> LoginResponse:
        return self.auth_service.authenticate(credentials)

    def get_session_user(self, token: str) -> UserInfo:
        return self.auth_service.get_current_user(token)
