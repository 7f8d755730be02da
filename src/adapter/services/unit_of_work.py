from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.credential_repository import CredentialRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.token_repository import TokenRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.credentials = CredentialRepository(self.session)
        self.tokens = TokenRepository(self.session)
        self.sessions = SessionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
