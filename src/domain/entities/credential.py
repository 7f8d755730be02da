"""
Credential Entity

Registration record consulted at login.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel


class Credential(SQLModel, table=True):
    """
    Credential entity - username, password hash and granted claims.

    Business Rules:
    - Username is unique and doubles as the login id
    - Password stored as bcrypt hash, never plaintext
    - Exactly one role, any number of permission tags
    - Permission tags may be wildcard patterns ("*", "user.*")
    """

    __tablename__ = "credentials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=64)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    email: Optional[str] = Field(default=None, max_length=255)

    role: str = Field(max_length=64)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
