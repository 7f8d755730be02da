"""
SessionAttribute Entity

One attribute of one session; a session is the set of rows sharing
(scope, session_key).
"""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel, UniqueConstraint

from .enums import SessionScope


class SessionAttribute(SQLModel, table=True):
    """
    SessionAttribute entity - key/value bag entry for a session.

    Business Rules:
    - (scope, session_key, attr_name) is unique; writes are upserts
    - account scope keyed by login id, token scope by token hash,
      custom scope by an arbitrary name
    - Values are JSON documents
    """

    __tablename__ = "session_attributes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    scope: SessionScope = Field(index=True)
    session_key: str = Field(max_length=255)
    attr_name: str = Field(max_length=255)
    attr_value: Any = Field(default=None, sa_column=Column(JSON))

    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        UniqueConstraint(
            "scope", "session_key", "attr_name", name="uq_session_attribute"
        ),
    )
