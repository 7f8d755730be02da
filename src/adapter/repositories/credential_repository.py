from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.credential_repository import ICredentialRepository
from src.domain.entities import Credential


class CredentialRepository(ICredentialRepository):
    """Credential repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_username(self, username: str) -> Optional[Credential]:
        """Get credential by username"""
        stmt = select(Credential).where(Credential.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, credential: Credential) -> Credential:
        """Create a new credential"""
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential

    async def list_all(self) -> List[Credential]:
        """List every registered credential"""
        stmt = select(Credential).order_by(Credential.username)
        result = await self.session.exec(stmt)
        return list(result.all())
