"""
Admin API Routes

Everything under /admin requires role admin or super-admin AND permission
admin via the central route table. The session endpoints end other accounts'
tokens on behalf of the operator with a chosen terminal status.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import ClientError, ServerError
from src.api.utils.authorization import get_request_principal
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.response import ResourceResponse
from src.app.use_cases.users import (
    AccountListResponse,
    KickoutResponse,
    KickoutUseCase,
    ListAccountsUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import LogoutPolicy
from src.domain.principal import Principal

router = APIRouter(prefix="/admin", tags=["Admin"])


class SettingsRequest(BaseModel):
    settings: Dict[str, Any] = Field(default_factory=dict)


class KickoutTokenRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Token value to end")


def _kickout_use_case(uow: UnitOfWork) -> KickoutUseCase:
    return KickoutUseCase(uow, LogoutPolicy(ApplicationConfig.ACCOUNT_SESSION_LOGOUT_POLICY))


def _raise_kickout_error(error):
    if error.code == "NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("/dashboard", response_model=ResourceResponse)
async def dashboard(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Welcome to the admin console",
        operator=principal.login_id,
        data={"role": principal.role, "permissions": sorted(principal.permissions)},
    )


@router.get("/settings", response_model=ResourceResponse)
async def get_settings(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="System settings",
        operator=principal.login_id,
        data={
            "systemName": "Authorization Gateway",
            "tokenHeader": ApplicationConfig.TOKEN_HEADER,
            "tokenTimeout": ApplicationConfig.TOKEN_TIMEOUT_SECONDS,
            "concurrentLogin": ApplicationConfig.ALLOW_CONCURRENT_LOGIN,
        },
    )


@router.put("/settings", response_model=ResourceResponse)
async def update_settings(
    request: SettingsRequest, principal: Principal = Depends(get_request_principal)
):
    """Acknowledges the submitted settings; runtime config is not modified"""
    return ResourceResponse(
        message="System settings updated", operator=principal.login_id, data=request.settings
    )


@router.get("/users", response_model=AccountListResponse)
async def list_accounts(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await ListAccountsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post(
    "/sessions/{login_id}/logout",
    status_code=status.HTTP_200_OK,
    response_model=KickoutResponse,
)
async def force_logout(
    login_id: str,
    device: Optional[str] = Query(None, description="Limit to one device type"),
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Forced Logout

    Ends the account's tokens as logged out. Their next request gets
    NOT_AUTHENTICATED.

    Raises:
        - 404 Not Found: Unknown login id
    """
    result = await _kickout_use_case(uow).logout_by_login_id(
        login_id, principal.login_id, device
    )
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value


@router.post(
    "/sessions/{login_id}/kickout",
    status_code=status.HTTP_200_OK,
    response_model=KickoutResponse,
)
async def kickout(
    login_id: str,
    device: Optional[str] = Query(None, description="Limit to one device type"),
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Kickout

    Ends the account's tokens as kicked out. Their next request gets
    TOKEN_KICKED_OUT.

    Raises:
        - 404 Not Found: Unknown login id
    """
    result = await _kickout_use_case(uow).kickout(login_id, principal.login_id, device)
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value


@router.post(
    "/tokens/kickout", status_code=status.HTTP_200_OK, response_model=KickoutResponse
)
async def kickout_token(
    request: KickoutTokenRequest,
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Token unknown or already ended
    """
    result = await _kickout_use_case(uow).kickout_by_token(request.token, principal.login_id)
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value


@router.post(
    "/sessions/{login_id}/replaced",
    status_code=status.HTTP_200_OK,
    response_model=KickoutResponse,
)
async def replace(
    login_id: str,
    device: Optional[str] = Query(None, description="Limit to one device type"),
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replacement

    Ends the account's tokens as replaced. Their next request gets
    TOKEN_REPLACED.

    Raises:
        - 404 Not Found: Unknown login id
    """
    result = await _kickout_use_case(uow).replace(login_id, principal.login_id, device)
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value


@router.post(
    "/tokens/logout", status_code=status.HTTP_200_OK, response_model=KickoutResponse
)
async def logout_token(
    request: KickoutTokenRequest,
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Token unknown or already ended
    """
    result = await _kickout_use_case(uow).logout_by_token(request.token, principal.login_id)
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value


@router.post(
    "/tokens/replaced", status_code=status.HTTP_200_OK, response_model=KickoutResponse
)
async def replace_token(
    request: KickoutTokenRequest,
    principal: Principal = Depends(get_request_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: Token unknown or already ended
    """
    result = await _kickout_use_case(uow).replace_by_token(request.token, principal.login_id)
    if result.is_err():
        _raise_kickout_error(result.error)
    return result.value
