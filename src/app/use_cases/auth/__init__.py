"""
Authentication Use Cases

Login, logout and token resolution.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .resolve_principal_use_case import ResolvePrincipalUseCase, load_live_token
from .token_info_use_case import TokenInfoUseCase
from .dtos import (
    IsLoginResponse,
    LoginResponse,
    LogoutResponse,
    RegisterResponse,
    TokenInfoResponse,
    UserInfoResponse,
)

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    "ResolvePrincipalUseCase",
    "TokenInfoUseCase",
    "load_live_token",
    # DTOs - Responses
    "IsLoginResponse",
    "LoginResponse",
    "LogoutResponse",
    "RegisterResponse",
    "TokenInfoResponse",
    "UserInfoResponse",
]
