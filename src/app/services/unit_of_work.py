from abc import ABC, abstractmethod

from src.app.repositories.credential_repository import ICredentialRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.token_repository import ITokenRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    credentials: ICredentialRepository
    tokens: ITokenRepository
    sessions: ISessionRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
