"""
Token Info Use Case
"""

from datetime import datetime

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TokenInfoResponse
from .resolve_principal_use_case import load_live_token


class TokenInfoUseCase:
    """Describes the presented token: owner, device, issue time and remaining lifetime"""

    def __init__(self, uow: UnitOfWork, token_name: str):
        self.uow = uow
        self.token_name = token_name

    async def execute(self, token: str) -> Result[TokenInfoResponse]:
        async with self.uow:
            loaded = await load_live_token(self.uow, token)
            if loaded.is_err():
                return Return.err(loaded.error)

            record = loaded.value
            remaining = int((record.expires_at - datetime.utcnow()).total_seconds())
            return Return.ok(
                TokenInfoResponse(
                    token_name=self.token_name,
                    token_value=token,
                    login_id=record.login_id,
                    device_type=record.device_type,
                    login_ip=record.login_ip,
                    created_at=record.created_at,
                    expires_at=record.expires_at,
                    timeout=max(remaining, 0),
                )
            )
