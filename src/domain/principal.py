"""
Principal Value Object

The authenticated actor as seen by the authorization gate.
"""

from fnmatch import fnmatchcase
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field


class Principal(BaseModel):
    """
    Authenticated actor built from the Account-Session.

    Business Rules:
    - login_id is the credential username
    - A principal carries at most one role
    - Granted permissions may be wildcard patterns ("*", "user.*")
    """

    model_config = ConfigDict(frozen=True)

    login_id: str
    role: Optional[str] = None
    permissions: FrozenSet[str] = Field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        return self.role is not None and self.role == role

    def has_permission(self, permission: str) -> bool:
        """True if any granted pattern matches the required permission"""
        return any(fnmatchcase(permission, granted) for granted in self.permissions)
