"""Auth use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .login import LoginRequest, LoginResponse, LoginUseCase
from .signup import SignupRequest, SignupResponse, SignupUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "SignupRequest",
    "SignupResponse",
    "SignupUseCase",
]
