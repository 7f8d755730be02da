"""
Compare Sessions Use Case
"""

from typing import Any, Dict, Optional

from libs.result import Result, Return
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from .dtos import CompareSessionsResponse

SYSTEM_CONFIG = "system-config"


class CompareSessionsUseCase:
    """
    Shows the three session variants side by side.

    Account and Token sessions are included only for a logged-in caller; the
    system-config Custom-Session is always included.
    """

    def __init__(self, uow: UnitOfWork, custom_name: str = SYSTEM_CONFIG):
        self.uow = uow
        self.custom_name = custom_name

    async def execute(
        self, login_id: Optional[str] = None, token: Optional[str] = None
    ) -> Result[CompareSessionsResponse]:
        async with self.uow:
            store = SessionStore(self.uow.sessions)
            fields: Dict[str, Any] = {}

            if login_id is not None and token is not None:
                account = store.for_account(login_id)
                token_session = store.for_token(token)
                fields.update(
                    account_session=await account.items(),
                    account_session_id=account.session_id,
                    token_session=await token_session.items(),
                    token_session_id=token_session.session_id,
                )

            custom = store.for_custom_key(self.custom_name)
            return Return.ok(
                CompareSessionsResponse(
                    custom_session=await custom.items(),
                    custom_session_id=custom.session_id,
                    **fields,
                )
            )
