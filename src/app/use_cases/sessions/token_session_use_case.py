"""
Token Session Use Case

Reads the session private to one issued token, and lists the live tokens of
an account.
"""

from libs.result import Result, Return
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TokenListResponse, TokenSessionResponse


class TokenSessionUseCase:
    """
    Use case for Token-Sessions.

    Business Rules:
    - Each login gets its own Token-Session holding device metadata
    - Token values are never listed, only token ids and devices
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_device(self, token: str) -> Result[TokenSessionResponse]:
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_token(token)
            return Return.ok(
                TokenSessionResponse(
                    session_id=session.session_id,
                    session_type="Token-Session",
                    data=await session.get("device"),
                    current_token=token,
                )
            )

    async def list_tokens(self, login_id: str) -> Result[TokenListResponse]:
        async with self.uow:
            tokens = await self.uow.tokens.get_active_by_login_id(login_id)
            return Return.ok(
                TokenListResponse(
                    data=[
                        {
                            "tokenId": str(t.id),
                            "deviceType": t.device_type,
                            "loginIp": t.login_ip,
                            "createdAt": t.created_at.isoformat(),
                            "expiresAt": t.expires_at.isoformat(),
                        }
                        for t in tokens
                    ]
                )
            )
