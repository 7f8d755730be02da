from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import ResolvePrincipalUseCase
from src.domain.principal import Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


class AuthContext(BaseModel):
    """Outcome of resolving the token presented with a request"""

    model_config = ConfigDict(frozen=True)

    token: Optional[str] = None
    principal: Optional[Principal] = None
    error: Optional[Error] = None


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Bearer token from the Authorization header, else from TOKEN_HEADER"""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.headers.get(ApplicationConfig.TOKEN_HEADER) or None


async def get_auth_context(
    token: Optional[str] = Depends(get_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthContext:
    """
    Resolve the caller without rejecting anonymous requests.

    Cached per request by FastAPI, so the gate and the handler share one
    resolution.
    """
    if token is None:
        return AuthContext()

    result = await ResolvePrincipalUseCase(uow).execute(token)
    if result.is_err():
        return AuthContext(token=token, error=result.error)
    return AuthContext(token=token, principal=result.value)


async def get_current_principal(
    context: AuthContext = Depends(get_auth_context),
) -> Principal:
    """
    Dependency returning the authenticated caller.

    Raises:
        ClientError: 401 NOT_AUTHENTICATED / TOKEN_* if the token does not resolve
    """
    if context.principal is None:
        raise ClientError(
            context.error or Error("NOT_AUTHENTICATED", "Authentication required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return context.principal


async def get_current_token(
    context: AuthContext = Depends(get_auth_context),
    principal: Principal = Depends(get_current_principal),
) -> str:
    """Dependency returning the token of the authenticated caller"""
    return context.token
