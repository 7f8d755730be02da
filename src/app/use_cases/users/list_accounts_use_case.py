"""
List Accounts Use Case
"""

from typing import Any, Dict, List

from libs.result import Result, Return
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.response import ApiResponse


class AccountListResponse(ApiResponse):
    """Known accounts with their claims and live token count"""

    data: List[Dict[str, Any]]


class ListAccountsUseCase:
    """
    Lists every credential for the admin console.

    Password hashes are never exposed. `online` reflects whether the account
    currently holds an Account-Session.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[AccountListResponse]:
        async with self.uow:
            store = SessionStore(self.uow.sessions)
            accounts = []
            for credential in await self.uow.credentials.list_all():
                tokens = await self.uow.tokens.get_active_by_login_id(credential.username)
                session_data = await store.for_account(credential.username).items()
                accounts.append(
                    {
                        "username": credential.username,
                        "role": credential.role,
                        "permissions": sorted(credential.permissions or []),
                        "activeTokens": len(tokens),
                        "online": bool(session_data),
                    }
                )
            return Return.ok(AccountListResponse(data=accounts))
