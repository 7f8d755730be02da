"""
Account Session Use Case

Reads and updates the session shared by every token of one login id.
"""

from libs.result import Result, Return
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SessionResponse


class AccountSessionUseCase:
    """
    Use case for the Account-Session.

    Business Rules:
    - One Account-Session per login id, whichever token resolved it
    - Writes through one device are visible to every other device
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get_info(self, login_id: str) -> Result[SessionResponse]:
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_account(login_id)
            return Return.ok(
                SessionResponse(
                    session_id=session.session_id,
                    session_type="Account-Session",
                    data=await session.items(),
                )
            )

    async def update_nickname(self, login_id: str, nickname: str) -> Result[SessionResponse]:
        """Rewrite profile.nickname; a missing profile is created"""
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_account(login_id)
            profile = dict(await session.get("profile") or {"username": login_id})
            profile["nickname"] = nickname
            await session.set("profile", profile)
            await self.uow.commit()

            return Return.ok(
                SessionResponse(
                    message="Nickname updated",
                    session_id=session.session_id,
                    session_type="Account-Session",
                    data=profile,
                )
            )
