from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Credential


class ICredentialRepository(ABC):
    """Credential repository interface - application layer"""

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Credential]:
        """Get credential by username"""
        pass

    @abstractmethod
    async def create(self, credential: Credential) -> Credential:
        """Create a new credential"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Credential]:
        """List every registered credential"""
        pass
