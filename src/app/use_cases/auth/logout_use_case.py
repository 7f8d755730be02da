"""
Logout Use Case

Ends the presented token only.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.session_store import hash_token
from src.app.services.token_lifecycle import end_tokens
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LogoutPolicy, TokenStatus
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for self-service logout.

    Business Rules:
    - Only the presented token is ended; other devices stay logged in
    - Its Token-Session is destroyed
    - Account-Session is destroyed or kept per policy once no token is left
    """

    def __init__(self, uow: UnitOfWork, policy: LogoutPolicy = LogoutPolicy.destroy):
        self.uow = uow
        self.policy = policy

    async def execute(self, token: str) -> Result[LogoutResponse]:
        async with self.uow:
            record = await self.uow.tokens.get_by_hash(hash_token(token))
            if record is None or record.status != TokenStatus.active:
                return Return.err(Error("NOT_AUTHENTICATED", "Token is not logged in"))

            await end_tokens(self.uow, [record], TokenStatus.logged_out, self.policy)
            await self.uow.commit()

            logger.info(f"Logout for {record.login_id} on {record.device_type}")

            return Return.ok(LogoutResponse(message="Logout succeeded"))
