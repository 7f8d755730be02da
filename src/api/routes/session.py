from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.routes import auth
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import IsLoginResponse, LoginResponse, LogoutResponse
from src.app.use_cases.sessions import (
    AccountSessionUseCase,
    CompareSessionsResponse,
    CompareSessionsUseCase,
    CustomSessionUseCase,
    SessionResponse,
    TokenListResponse,
    TokenSessionResponse,
    TokenSessionUseCase,
)
from src.depends import (
    AuthContext,
    get_auth_context,
    get_current_principal,
    get_current_token,
    get_unit_of_work,
)
from src.domain.principal import Principal

router = APIRouter(prefix="/session", tags=["Sessions"])

# Same behavior as the /auth endpoints
router.add_api_route("/login", auth.login, methods=["POST"], response_model=LoginResponse)
router.add_api_route("/logout", auth.logout, methods=["POST"], response_model=LogoutResponse)
router.add_api_route("/isLogin", auth.is_login, methods=["GET"], response_model=IsLoginResponse)


class CustomAttributeRequest(BaseModel):
    value: Any = Field(..., description="Any JSON value")


@router.get("/account/info", response_model=SessionResponse)
async def account_info(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Account-Session of the caller, shared by all of its tokens"""
    result = await AccountSessionUseCase(uow).get_info(principal.login_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/account/nickname", response_model=SessionResponse)
async def update_nickname(
    nickname: str = Query(..., min_length=1, max_length=64),
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Rewrite profile.nickname; visible through every device of the account"""
    result = await AccountSessionUseCase(uow).update_nickname(principal.login_id, nickname)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/token/device", response_model=TokenSessionResponse)
async def token_device(
    token: str = Depends(get_current_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await TokenSessionUseCase(uow).get_device(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/token/list", response_model=TokenListResponse)
async def token_list(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await TokenSessionUseCase(uow).list_tokens(principal.login_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/custom/{name}", response_model=SessionResponse)
async def get_custom_session(name: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Custom-Session by name; readable without login"""
    use_case = CustomSessionUseCase(uow, ApplicationConfig.CUSTOM_SESSION_DEFAULTS)
    result = await use_case.get(name)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/custom/{name}/{attr}", response_model=SessionResponse)
async def set_custom_attribute(
    name: str,
    attr: str,
    request: CustomAttributeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CustomSessionUseCase(uow, ApplicationConfig.CUSTOM_SESSION_DEFAULTS)
    result = await use_case.set(name, attr, request.value)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/custom/{name}/{attr}", response_model=SessionResponse)
async def remove_custom_attribute(
    name: str, attr: str, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Raises:
        - 404 Not Found: Attribute not present
    """
    use_case = CustomSessionUseCase(uow, ApplicationConfig.CUSTOM_SESSION_DEFAULTS)
    result = await use_case.remove(name, attr)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/compare", response_model=CompareSessionsResponse)
async def compare_sessions(
    context: AuthContext = Depends(get_auth_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Account, Token and Custom sessions side by side; the first two only when logged in"""
    login_id = context.principal.login_id if context.principal else None
    token = context.token if context.principal else None
    result = await CompareSessionsUseCase(uow).execute(login_id, token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
