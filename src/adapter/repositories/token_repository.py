from datetime import datetime
from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.token_repository import ITokenRepository
from src.domain.entities import LoginToken, TokenStatus


class TokenRepository(ITokenRepository):
    """Login token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: LoginToken) -> LoginToken:
        """Create a new token record"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_by_hash(self, token_hash: str) -> Optional[LoginToken]:
        """Get token record by SHA-256 hash of the token value"""
        stmt = select(LoginToken).where(LoginToken.token_hash == token_hash)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_login_id(
        self, login_id: str, device_type: Optional[str] = None
    ) -> List[LoginToken]:
        """Get active, unexpired tokens of a login id, oldest first"""
        stmt = select(LoginToken).where(
            LoginToken.login_id == login_id,
            LoginToken.status == TokenStatus.active,
            LoginToken.expires_at > datetime.utcnow(),
        )
        if device_type is not None:
            stmt = stmt.where(LoginToken.device_type == device_type)
        result = await self.session.exec(stmt.order_by(LoginToken.created_at))
        return list(result.all())

    async def end(self, token: LoginToken, status: TokenStatus) -> LoginToken:
        """Move an active token to a terminal status"""
        token.status = status
        token.ended_at = datetime.utcnow()
        self.session.add(token)
        await self.session.flush()
        return token
