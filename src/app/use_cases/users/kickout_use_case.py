"""
Kickout Use Case

Admin-initiated termination of another account's tokens.
"""

import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.session_store import hash_token
from src.app.services.token_lifecycle import end_tokens
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.response import ApiResponse
from src.domain.entities import LogoutPolicy, TokenStatus

logger = logging.getLogger(__name__)


class KickoutResponse(ApiResponse):
    """Response for forced logout / kickout"""

    login_id: str
    device_type: Optional[str] = None
    revoked_count: int


_ENDED_MESSAGES = {
    TokenStatus.logged_out: "Logged out",
    TokenStatus.kicked_out: "Kicked offline",
    TokenStatus.replaced: "Replaced",
}


class KickoutUseCase:
    """
    Use case for ending another account's tokens.

    Business Rules:
    - Forced logout marks tokens logged_out; the client sees NOT_AUTHENTICATED
    - Kickout marks tokens kicked_out; the client sees TOKEN_KICKED_OUT
    - Replacement marks tokens replaced; the client sees TOKEN_REPLACED
    - Each operation targets a login id (optionally one device type) or a
      single token value
    - Token-Sessions are destroyed, the Account-Session follows the policy
    - Custom-Sessions are never touched
    """

    def __init__(self, uow: UnitOfWork, policy: LogoutPolicy = LogoutPolicy.destroy):
        self.uow = uow
        self.policy = policy

    async def logout_by_login_id(
        self, login_id: str, operator: str, device_type: Optional[str] = None
    ) -> Result[KickoutResponse]:
        return await self._end_account_tokens(
            login_id, operator, device_type, TokenStatus.logged_out
        )

    async def kickout(
        self, login_id: str, operator: str, device_type: Optional[str] = None
    ) -> Result[KickoutResponse]:
        return await self._end_account_tokens(
            login_id, operator, device_type, TokenStatus.kicked_out
        )

    async def replace(
        self, login_id: str, operator: str, device_type: Optional[str] = None
    ) -> Result[KickoutResponse]:
        return await self._end_account_tokens(
            login_id, operator, device_type, TokenStatus.replaced
        )

    async def logout_by_token(self, token: str, operator: str) -> Result[KickoutResponse]:
        return await self._end_one_token(token, operator, TokenStatus.logged_out)

    async def kickout_by_token(self, token: str, operator: str) -> Result[KickoutResponse]:
        return await self._end_one_token(token, operator, TokenStatus.kicked_out)

    async def replace_by_token(self, token: str, operator: str) -> Result[KickoutResponse]:
        return await self._end_one_token(token, operator, TokenStatus.replaced)

    async def _end_one_token(
        self, token: str, operator: str, status: TokenStatus
    ) -> Result[KickoutResponse]:
        """
        End one token with the given status.

        Args:
            token: Token value to end
            operator: Login id of the admin performing the operation
            status: Terminal status recorded on the token

        Returns:
            Result with count of ended tokens (always 1), or NOT_FOUND
        """
        async with self.uow:
            record = await self.uow.tokens.get_by_hash(hash_token(token))
            if record is None or record.status != TokenStatus.active:
                return Return.err(Error("NOT_FOUND", "Token not found or already ended"))

            count = await end_tokens(self.uow, [record], status, self.policy)
            await self.uow.commit()

            logger.info(
                f"{operator} ended token {record.id} of {record.login_id} "
                f"(status={status.value})"
            )

            return Return.ok(
                KickoutResponse(
                    message=f"Token {_ENDED_MESSAGES[status].lower()}",
                    login_id=record.login_id,
                    device_type=record.device_type,
                    revoked_count=count,
                )
            )

    async def _end_account_tokens(
        self,
        login_id: str,
        operator: str,
        device_type: Optional[str],
        status: TokenStatus,
    ) -> Result[KickoutResponse]:
        async with self.uow:
            credential = await self.uow.credentials.get_by_username(login_id)
            if credential is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            tokens = await self.uow.tokens.get_active_by_login_id(login_id, device_type)
            count = await end_tokens(self.uow, tokens, status, self.policy)
            await self.uow.commit()

            logger.info(
                f"{operator} ended {count} token(s) of {login_id} "
                f"(device={device_type or 'all'}, status={status.value})"
            )

            return Return.ok(
                KickoutResponse(
                    message=_ENDED_MESSAGES[status],
                    login_id=login_id,
                    device_type=device_type,
                    revoked_count=count,
                )
            )
