"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional

from src.app.use_cases.response import ApiResponse


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(ApiResponse):
    """Response for login use case"""

    token: str
    username: str
    role: str
    permissions: List[str]


class RegisterResponse(ApiResponse):
    """Response for the registration stub"""


class LogoutResponse(ApiResponse):
    """Response for logout use case"""


class IsLoginResponse(ApiResponse):
    """Response for login status check"""

    is_login: bool
    token_value: Optional[str] = None


class UserInfoResponse(ApiResponse):
    """Current principal as seen by the gate"""

    login_id: str
    role: Optional[str] = None
    permissions: List[str]


class TokenInfoResponse(ApiResponse):
    """Details of the presented token"""

    token_name: str
    token_value: str
    login_id: str
    device_type: str
    login_ip: Optional[str] = None
    created_at: datetime
    expires_at: datetime
    timeout: int
