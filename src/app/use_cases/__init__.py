"""
Use Cases

Organized into domain folders:
- auth/: Login, logout, token resolution
- sessions/: Account-, Token- and Custom-Session access
- users/: Account listing, admin kickout and forced logout

Import from subdirectories for better organization.
"""

from .auth import (
    LoginUseCase,
    LogoutUseCase,
    ResolvePrincipalUseCase,
    TokenInfoUseCase,
)
from .sessions import (
    AccountSessionUseCase,
    CompareSessionsUseCase,
    CustomSessionUseCase,
    TokenSessionUseCase,
)
from .users import KickoutUseCase, ListAccountsUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    "ResolvePrincipalUseCase",
    "TokenInfoUseCase",
    # Sessions
    "AccountSessionUseCase",
    "CompareSessionsUseCase",
    "CustomSessionUseCase",
    "TokenSessionUseCase",
    # Users
    "KickoutUseCase",
    "ListAccountsUseCase",
]
