"""Authentication use cases."""

from .get_current_account import GetCurrentAccountRequest, GetCurrentAccountUseCase
from .login import LoginRequest, LoginUseCase
from .signup import AuthResponse, SignupRequest, SignupUseCase

__all__ = [
    "AuthResponse",
    "GetCurrentAccountRequest",
    "GetCurrentAccountUseCase",
    "LoginRequest",
    "LoginUseCase",
    "SignupRequest",
    "SignupUseCase",
]
