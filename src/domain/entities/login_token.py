"""
LoginToken Entity

Server-side record of an issued bearer token.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import TokenStatus


class LoginToken(SQLModel, table=True):
    """
    LoginToken entity - one row per successful login.

    Business Rules:
    - id equals the token's jti claim
    - Only the SHA-256 hash of the token value is stored
    - Only active, unexpired tokens resolve to a principal
    - A login id may hold many active tokens (one per device/login)
    """

    __tablename__ = "login_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    token_hash: str = Field(unique=True, index=True, max_length=64)
    login_id: str = Field(index=True, max_length=64)

    device_type: str = Field(default="default", max_length=32)
    login_ip: Optional[str] = Field(default=None, max_length=64)

    status: TokenStatus = Field(default=TokenStatus.active)
    ended_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_login_token_login_status", "login_id", "status"),
        Index("idx_login_token_expires_at", "expires_at"),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or datetime.utcnow())
