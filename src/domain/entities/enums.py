"""
Authorization Gateway Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TokenStatus(str, Enum):
    """Lifecycle state of an issued login token"""

    active = "active"
    logged_out = "logged_out"
    kicked_out = "kicked_out"
    replaced = "replaced"


class SessionScope(str, Enum):
    """Which of the three session variants an attribute belongs to"""

    account = "account"
    token = "token"
    custom = "custom"


class LogoutPolicy(str, Enum):
    """What happens to the Account-Session when its last live token ends"""

    destroy = "destroy"
    retain = "retain"
