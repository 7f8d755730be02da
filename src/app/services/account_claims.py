"""
Account Claims

Role and permissions of a credential as stored in its Account-Session.
"""

from typing import List

from src.app.services.session_store import SessionHandle
from src.domain.entities import Credential


async def write_claims(account_session: SessionHandle, credential: Credential) -> List[str]:
    """Upsert role and sorted permissions; returns the permissions written"""
    permissions = sorted(credential.permissions or [])
    await account_session.set("role", credential.role)
    await account_session.set("permissions", permissions)
    return permissions
