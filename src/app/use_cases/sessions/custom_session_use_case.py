"""
Custom Session Use Case

Sessions keyed by an arbitrary name, shared by every caller.
"""

from typing import Any, Dict, Optional

from libs.result import Error, Result, Return
from src.app.services.session_store import SessionStore
from src.app.services.unit_of_work import UnitOfWork
from .dtos import SessionResponse


class CustomSessionUseCase:
    """
    Use case for Custom-Sessions.

    Business Rules:
    - Readable and writable by anyone who knows the name, logged in or not
    - Last writer wins per attribute
    - Never touched by login, logout or kickout
    - A configured default bag is written on the first read of an empty session
    """

    def __init__(self, uow: UnitOfWork, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self.uow = uow
        self.defaults = defaults or {}

    async def get(self, name: str) -> Result[SessionResponse]:
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_custom_key(name)
            data = await session.items()

            if not data and name in self.defaults:
                for attr_name, attr_value in self.defaults[name].items():
                    await session.set(attr_name, attr_value)
                await self.uow.commit()
                data = dict(self.defaults[name])

            return Return.ok(
                SessionResponse(
                    session_id=session.session_id,
                    session_type="Custom-Session",
                    data=data,
                )
            )

    async def set(self, name: str, attr_name: str, attr_value: Any) -> Result[SessionResponse]:
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_custom_key(name)
            await session.set(attr_name, attr_value)
            await self.uow.commit()

            return Return.ok(
                SessionResponse(
                    message=f"{attr_name} updated",
                    session_id=session.session_id,
                    session_type="Custom-Session",
                    data=await session.items(),
                )
            )

    async def remove(self, name: str, attr_name: str) -> Result[SessionResponse]:
        async with self.uow:
            session = SessionStore(self.uow.sessions).for_custom_key(name)
            if not await session.remove(attr_name):
                return Return.err(
                    Error("NOT_FOUND", f"Attribute {attr_name} not found in {name}")
                )
            await self.uow.commit()

            return Return.ok(
                SessionResponse(
                    message=f"{attr_name} removed",
                    session_id=session.session_id,
                    session_type="Custom-Session",
                    data=await session.items(),
                )
            )
