from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import LoginToken, TokenStatus


class ITokenRepository(ABC):
    """Login token repository interface - application layer"""

    @abstractmethod
    async def create(self, token: LoginToken) -> LoginToken:
        """Create a new token record"""
        pass

    @abstractmethod
    async def get_by_hash(self, token_hash: str) -> Optional[LoginToken]:
        """Get token record by SHA-256 hash of the token value"""
        pass

    @abstractmethod
    async def get_active_by_login_id(
        self, login_id: str, device_type: Optional[str] = None
    ) -> List[LoginToken]:
        """Get active, unexpired tokens of a login id, optionally for one device type"""
        pass

    @abstractmethod
    async def end(self, token: LoginToken, status: TokenStatus) -> LoginToken:
        """Move an active token to a terminal status"""
        pass
