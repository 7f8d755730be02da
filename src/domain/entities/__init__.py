"""
Authorization Gateway Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import LogoutPolicy, SessionScope, TokenStatus

# Export all entities
from .credential import Credential
from .login_token import LoginToken
from .session_attribute import SessionAttribute

__all__ = [
    # Enums
    "LogoutPolicy",
    "SessionScope",
    "TokenStatus",
    # Entities
    "Credential",
    "LoginToken",
    "SessionAttribute",
]
