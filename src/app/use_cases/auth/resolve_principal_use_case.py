"""
Resolve Principal Use Case

Resolves a presented bearer token to the Principal behind it.
"""

import logging

from libs.result import Error, Result, Return
from src.api.utils.jwt import verify_jwt
from src.app.services.account_claims import write_claims
from src.app.services.session_store import SessionStore, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LoginToken, TokenStatus
from src.domain.principal import Principal

logger = logging.getLogger(__name__)

_ENDED_TOKEN_ERRORS = {
    TokenStatus.logged_out: Error("NOT_AUTHENTICATED", "Token has been logged out"),
    TokenStatus.kicked_out: Error("TOKEN_KICKED_OUT", "Token has been kicked offline"),
    TokenStatus.replaced: Error("TOKEN_REPLACED", "Token has been replaced by a newer login"),
}


async def load_live_token(uow: UnitOfWork, token: str) -> Result[LoginToken]:
    """
    Look up the server-side record of an active, unexpired token.

    Must be called inside `async with uow`.
    """
    payload = verify_jwt(token, verify_exp=False)
    if payload is None:
        return Return.err(Error("NOT_AUTHENTICATED", "Invalid token"))

    record = await uow.tokens.get_by_hash(hash_token(token))
    if record is None or record.login_id != payload.get("login_id"):
        return Return.err(Error("NOT_AUTHENTICATED", "Invalid token"))

    if record.status != TokenStatus.active:
        return Return.err(_ENDED_TOKEN_ERRORS[record.status])

    if record.is_expired():
        return Return.err(Error("TOKEN_EXPIRED", "Token has expired"))

    return Return.ok(record)


class ResolvePrincipalUseCase:
    """
    Use case for resolving the caller of a request.

    Business Rules:
    - Token must verify, be known, active and unexpired
    - Role and permissions come from the Account-Session, so every token of
      the same login id sees the same claims
    - Claims missing from the Account-Session (destroyed by a logout racing
      this token's login) are reloaded from the credential and written back
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[Principal]:
        """
        Execute resolve principal use case.

        Args:
            token: Bearer token value

        Returns:
            Result with Principal, or NOT_AUTHENTICATED / TOKEN_* Error
        """
        async with self.uow:
            loaded = await load_live_token(self.uow, token)
            if loaded.is_err():
                return Return.err(loaded.error)

            login_id = loaded.value.login_id
            account_session = SessionStore(self.uow.sessions).for_account(login_id)
            claims = await account_session.items()

            if "role" not in claims:
                credential = await self.uow.credentials.get_by_username(login_id)
                if credential is None:
                    return Return.err(Error("NOT_AUTHENTICATED", "Account no longer exists"))
                claims["role"] = credential.role
                claims["permissions"] = await write_claims(account_session, credential)
                await self.uow.commit()
                logger.warning(f"Account-Session claims of {login_id} were missing, reloaded")

            return Return.ok(
                Principal(
                    login_id=login_id,
                    role=claims.get("role"),
                    permissions=frozenset(claims.get("permissions") or []),
                )
            )
