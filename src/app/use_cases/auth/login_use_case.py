"""
Login Use Case

Authenticates credentials, issues a bearer token and populates the
Account-Session and Token-Session.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import uuid4

import bcrypt

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.api.utils.jwt import issue_token
from src.app.services.account_claims import write_claims
from src.app.services.session_store import SessionStore, hash_token
from src.app.services.token_lifecycle import end_tokens
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LoginToken, LogoutPolicy, TokenStatus
from .dtos import LoginResponse

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72

# Compared against when the username is unknown so both failure paths cost one bcrypt check
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Failed login writes nothing
    - Every login issues a distinct token (multi-device)
    - Account-Session receives role, permissions and profile
    - Token-Session receives device metadata
    - Without concurrent login, live tokens of the same device are replaced
    """

    def __init__(self, uow: UnitOfWork, allow_concurrent_login: bool = True):
        self.uow = uow
        self.allow_concurrent_login = allow_concurrent_login

    async def execute(
        self,
        username: str,
        password: str,
        device_type: str = "default",
        login_ip: Optional[str] = None,
    ) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            username: Login name
            password: Plain text password
            device_type: Device the login comes from (PC, APP, H5, ...)
            login_ip: Client address, recorded in the Token-Session

        Returns:
            Result with LoginResponse containing the token and claims, or Error
        """
        encoded = password.encode()

        async with self.uow:
            credential = await self.uow.credentials.get_by_username(username)

            # bcrypt refuses inputs over 72 bytes; such a password can never match
            if credential is None or len(encoded) > _BCRYPT_MAX_BYTES:
                bcrypt.checkpw(encoded[:_BCRYPT_MAX_BYTES], _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIAL", "Invalid username or password")
                )

            if not bcrypt.checkpw(encoded, credential.password_hash.encode()):
                return Return.err(
                    Error("INVALID_CREDENTIAL", "Invalid username or password")
                )

            if not self.allow_concurrent_login:
                previous = await self.uow.tokens.get_active_by_login_id(
                    credential.username, device_type
                )
                await end_tokens(
                    self.uow, previous, TokenStatus.replaced, LogoutPolicy.retain
                )

            jti = uuid4()
            token_value, expires_at = issue_token(credential.username, jti, device_type)
            await self.uow.tokens.create(
                LoginToken(
                    id=jti,
                    token_hash=hash_token(token_value),
                    login_id=credential.username,
                    device_type=device_type,
                    login_ip=login_ip,
                    expires_at=expires_at,
                )
            )

            store = SessionStore(self.uow.sessions)

            account_session = store.for_account(credential.username)
            permissions = await write_claims(account_session, credential)
            if await account_session.get("profile") is None:
                await account_session.set(
                    "profile",
                    {
                        "username": credential.username,
                        "nickname": credential.username,
                        "email": credential.email,
                    },
                )

            await store.for_token(token_value).set(
                "device",
                {
                    "deviceType": device_type,
                    "loginIp": login_ip,
                    "loginTime": datetime.utcnow().isoformat(),
                },
            )

            await self.uow.commit()

            logger.info(f"Login succeeded for {credential.username} on {device_type}")

            return Return.ok(
                LoginResponse(
                    message="Login succeeded",
                    token=token_value,
                    username=credential.username,
                    role=credential.role,
                    permissions=permissions,
                )
            )
