"""
Bootstrap

Schema creation and credential seeding at startup.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import bcrypt
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Credential

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "123456"

DEMO_ACCOUNTS: List[Dict[str, Any]] = [
    {
        "username": "user",
        "password": DEFAULT_PASSWORD,
        "role": "user",
        "permissions": ["user"],
    },
    {
        "username": "admin",
        "password": DEFAULT_PASSWORD,
        "role": "admin",
        "permissions": ["admin", "user", "goods", "orders"],
    },
    {
        "username": "super-admin",
        "password": DEFAULT_PASSWORD,
        "role": "super-admin",
        "permissions": ["admin", "user", "goods", "orders", "notice", "comment"],
    },
    {
        "username": "goods-admin",
        "password": DEFAULT_PASSWORD,
        "role": "admin",
        "permissions": ["goods"],
    },
]


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables known to SQLModel metadata"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def seed_credentials(
    uow: UnitOfWork,
    accounts: Optional[Iterable[Dict[str, Any]]] = None,
    rounds: int = 12,
) -> int:
    """
    Seed credentials, skipping usernames that already exist.

    Args:
        uow: Unit of work
        accounts: Dicts with username, password, role, permissions, email;
            defaults to the demo accounts
        rounds: bcrypt cost factor

    Returns:
        Number of credentials created
    """
    created = 0
    async with uow:
        for account in DEMO_ACCOUNTS if accounts is None else accounts:
            if await uow.credentials.get_by_username(account["username"]) is not None:
                continue
            password_hash = bcrypt.hashpw(
                account["password"].encode(), bcrypt.gensalt(rounds)
            )
            await uow.credentials.create(
                Credential(
                    username=account["username"],
                    password_hash=password_hash.decode(),
                    email=account.get("email"),
                    role=account["role"],
                    permissions=list(account.get("permissions", [])),
                )
            )
            created += 1
        await uow.commit()

    if created:
        logger.info(f"Seeded {created} credential(s)")
    return created
