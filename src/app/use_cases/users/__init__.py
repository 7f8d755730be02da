"""
User Management Use Cases

Admin operations on accounts and their tokens.
"""

from .kickout_use_case import KickoutResponse, KickoutUseCase
from .list_accounts_use_case import AccountListResponse, ListAccountsUseCase

__all__ = [
    # Use Cases
    "KickoutUseCase",
    "ListAccountsUseCase",
    # DTOs - Responses
    "AccountListResponse",
    "KickoutResponse",
]
