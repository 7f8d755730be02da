"""
Session Use Cases

Account-, Token- and Custom-Session access.
"""

from .account_session_use_case import AccountSessionUseCase
from .token_session_use_case import TokenSessionUseCase
from .custom_session_use_case import CustomSessionUseCase
from .compare_sessions_use_case import CompareSessionsUseCase
from .dtos import (
    CompareSessionsResponse,
    SessionResponse,
    TokenListResponse,
    TokenSessionResponse,
)

__all__ = [
    # Use Cases
    "AccountSessionUseCase",
    "TokenSessionUseCase",
    "CustomSessionUseCase",
    "CompareSessionsUseCase",
    # DTOs - Responses
    "CompareSessionsResponse",
    "SessionResponse",
    "TokenListResponse",
    "TokenSessionResponse",
]
