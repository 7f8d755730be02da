"""
Token Lifecycle

Ending tokens is shared by self-service logout and admin kickout.
"""

import logging
from typing import Sequence

from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LoginToken, LogoutPolicy, TokenStatus

logger = logging.getLogger(__name__)


async def end_tokens(
    uow: UnitOfWork,
    tokens: Sequence[LoginToken],
    status: TokenStatus,
    policy: LogoutPolicy = LogoutPolicy.destroy,
) -> int:
    """
    Move tokens to a terminal status and clean up their sessions.

    Each token's Token-Session is destroyed. An Account-Session is destroyed
    only when its login id has no live token left and the policy says so.
    Caller commits.

    Returns:
        Number of tokens ended
    """
    store = SessionStore(uow.sessions)
    login_ids = []
    for token in tokens:
        await uow.tokens.end(token, status)
        await store.for_token_hash(token.token_hash).destroy()
        if token.login_id not in login_ids:
            login_ids.append(token.login_id)

    for login_id in login_ids:
        remaining = await uow.tokens.get_active_by_login_id(login_id)
        if remaining:
            continue
        if policy == LogoutPolicy.destroy:
            await store.for_account(login_id).destroy()
            logger.info(f"Account-Session of {login_id} destroyed, no live token left")

    return len(tokens)
