"""
Session Store

Uniform key -> attribute-bag view over the three session variants. Callers
always name the session they touch through an explicit key:

- AccountKey(login_id): shared by every token of the same login id
- TokenKey(token_hash): private to one issued token
- CustomKey(name): global, unrelated to any login

Sessions exist implicitly; reading an absent attribute returns the default.
Writes are per-attribute upserts and become durable on uow.commit().
"""

import hashlib
from typing import Any, ClassVar, Dict, List, Union

from pydantic import BaseModel, ConfigDict

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import SessionScope


def hash_token(token: str) -> str:
    """SHA-256 hex digest used as the storage key of a token"""
    return hashlib.sha256(token.encode()).hexdigest()


class AccountKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    login_id: str

    scope: ClassVar[SessionScope] = SessionScope.account

    @property
    def storage_key(self) -> str:
        return self.login_id


class TokenKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_hash: str

    scope: ClassVar[SessionScope] = SessionScope.token

    @classmethod
    def from_token(cls, token: str) -> "TokenKey":
        return cls(token_hash=hash_token(token))

    @property
    def storage_key(self) -> str:
        return self.token_hash


class CustomKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    scope: ClassVar[SessionScope] = SessionScope.custom

    @property
    def storage_key(self) -> str:
        return self.name


SessionKey = Union[AccountKey, TokenKey, CustomKey]


class SessionHandle:
    """Attribute access for one session"""

    def __init__(self, repository: ISessionRepository, key: SessionKey):
        self._repository = repository
        self.key = key

    @property
    def session_id(self) -> str:
        return f"{self.key.scope.value}:{self.key.storage_key}"

    async def get(self, name: str, default: Any = None) -> Any:
        attribute = await self._repository.get_attribute(
            self.key.scope, self.key.storage_key, name
        )
        if attribute is None:
            return default
        return attribute.attr_value

    async def set(self, name: str, value: Any) -> None:
        await self._repository.upsert_attribute(
            self.key.scope, self.key.storage_key, name, value
        )

    async def remove(self, name: str) -> bool:
        return await self._repository.delete_attribute(
            self.key.scope, self.key.storage_key, name
        )

    async def items(self) -> Dict[str, Any]:
        return await self._repository.get_attributes(
            self.key.scope, self.key.storage_key
        )

    async def keys(self) -> List[str]:
        return sorted(await self.items())

    async def destroy(self) -> int:
        return await self._repository.delete_session(
            self.key.scope, self.key.storage_key
        )


class SessionStore:
    """Scope-specific constructors for session handles"""

    def __init__(self, repository: ISessionRepository):
        self._repository = repository

    def for_key(self, key: SessionKey) -> SessionHandle:
        return SessionHandle(self._repository, key)

    def for_account(self, login_id: str) -> SessionHandle:
        return self.for_key(AccountKey(login_id=login_id))

    def for_token(self, token: str) -> SessionHandle:
        return self.for_key(TokenKey.from_token(token))

    def for_token_hash(self, token_hash: str) -> SessionHandle:
        return self.for_key(TokenKey(token_hash=token_hash))

    def for_custom_key(self, name: str) -> SessionHandle:
        return self.for_key(CustomKey(name=name))
