"""
Session Use Case DTOs
"""

from typing import Any, Dict, List, Optional

from src.app.use_cases.response import ApiResponse


class SessionResponse(ApiResponse):
    """One session's attributes"""

    session_id: str
    session_type: str
    data: Any = None


class TokenSessionResponse(SessionResponse):
    """Token-Session of the presented token"""

    current_token: str


class TokenListResponse(ApiResponse):
    """Live tokens of the current account"""

    data: List[Dict[str, Any]]


class CompareSessionsResponse(ApiResponse):
    """The three session variants side by side"""

    account_session: Optional[Dict[str, Any]] = None
    account_session_id: Optional[str] = None
    token_session: Optional[Dict[str, Any]] = None
    token_session_id: Optional[str] = None
    custom_session: Dict[str, Any]
    custom_session_id: str
