from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from src.domain.entities import SessionAttribute, SessionScope


class ISessionRepository(ABC):
    """Session attribute repository interface - application layer"""

    @abstractmethod
    async def get_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str
    ) -> Optional[SessionAttribute]:
        """Get one attribute of a session, None if absent"""
        pass

    @abstractmethod
    async def upsert_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str, attr_value: Any
    ) -> None:
        """Atomically insert or overwrite one attribute"""
        pass

    @abstractmethod
    async def delete_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str
    ) -> bool:
        """Delete one attribute. Returns True if it existed."""
        pass

    @abstractmethod
    async def get_attributes(
        self, scope: SessionScope, session_key: str
    ) -> Dict[str, Any]:
        """Get all attributes of a session as a name -> value mapping"""
        pass

    @abstractmethod
    async def delete_session(self, scope: SessionScope, session_key: str) -> int:
        """Delete every attribute of a session. Returns count deleted."""
        pass
