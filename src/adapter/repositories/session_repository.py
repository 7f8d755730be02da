from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import SessionAttribute, SessionScope

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SessionRepository(ISessionRepository):
    """Session attribute repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str
    ) -> Optional[SessionAttribute]:
        """Get one attribute of a session, None if absent"""
        stmt = select(SessionAttribute).where(
            SessionAttribute.scope == scope,
            SessionAttribute.session_key == session_key,
            SessionAttribute.attr_name == attr_name,
        ).execution_options(populate_existing=True)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def upsert_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str, attr_value: Any
    ) -> None:
        """
        Insert or overwrite one attribute.

        Uses a single INSERT ... ON CONFLICT DO UPDATE where the dialect
        supports it so concurrent writers to the same attribute resolve to
        last-write-wins instead of a unique violation.
        """
        now = datetime.utcnow()
        insert = _UPSERT_DIALECTS.get(self.session.bind.dialect.name)

        if insert is None:
            existing = await self.get_attribute(scope, session_key, attr_name)
            if existing is None:
                existing = SessionAttribute(
                    scope=scope, session_key=session_key, attr_name=attr_name
                )
            existing.attr_value = attr_value
            existing.updated_at = now
            self.session.add(existing)
            await self.session.flush()
            return

        stmt = insert(SessionAttribute).values(
            id=uuid4(),
            scope=scope,
            session_key=session_key,
            attr_name=attr_name,
            attr_value=attr_value,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["scope", "session_key", "attr_name"],
            set_={
                "attr_value": stmt.excluded.attr_value,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)

    async def delete_attribute(
        self, scope: SessionScope, session_key: str, attr_name: str
    ) -> bool:
        """Delete one attribute. Returns True if it existed."""
        stmt = delete(SessionAttribute).where(
            SessionAttribute.scope == scope,
            SessionAttribute.session_key == session_key,
            SessionAttribute.attr_name == attr_name,
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def get_attributes(
        self, scope: SessionScope, session_key: str
    ) -> Dict[str, Any]:
        """Get all attributes of a session as a name -> value mapping"""
        stmt = (
            select(SessionAttribute)
            .where(
                SessionAttribute.scope == scope,
                SessionAttribute.session_key == session_key,
            )
            .order_by(SessionAttribute.attr_name)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return {attribute.attr_name: attribute.attr_value for attribute in result.all()}

    async def delete_session(self, scope: SessionScope, session_key: str) -> int:
        """Delete every attribute of a session"""
        stmt = delete(SessionAttribute).where(
            SessionAttribute.scope == scope,
            SessionAttribute.session_key == session_key,
        )
        result = await self.session.execute(stmt)
        return result.rowcount
