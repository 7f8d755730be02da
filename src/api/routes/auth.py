from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from config import ApplicationConfig
from src.api.error import ClientError, ServerError, raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    IsLoginResponse,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RegisterResponse,
    TokenInfoResponse,
    TokenInfoUseCase,
    UserInfoResponse,
)
from src.depends import (
    AuthContext,
    get_auth_context,
    get_current_principal,
    get_current_token,
    get_unit_of_work,
)
from src.domain.entities import LogoutPolicy
from src.domain.principal import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Plain text password")
    device_type: str = Field(
        "default", min_length=1, max_length=32, description="PC, APP, H5, ..."
    )


class RegisterRequest(BaseModel):
    """Registration HTTP request payload"""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=6)
    email: Optional[EmailStr] = None


def _client_ip(http_request: Request) -> Optional[str]:
    return http_request.client.host if http_request.client else None


@router.post("/doLogin", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Login

    Verifies the credential and issues a bearer token. Each login issues a
    distinct token; earlier tokens of the same account stay valid unless
    ALLOW_CONCURRENT_LOGIN is off, in which case same-device tokens are
    replaced.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIAL
        - 422 Unprocessable Entity: Missing username or password
    """
    use_case = LoginUseCase(uow, ApplicationConfig.ALLOW_CONCURRENT_LOGIN)
    result = await use_case.execute(
        request.username,
        request.password,
        device_type=request.device_type,
        login_ip=_client_ip(http_request),
    )

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIAL":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post(
    "/register", status_code=status.HTTP_200_OK, response_model=RegisterResponse
)
async def register(request: RegisterRequest):
    """Registration acknowledgement; nothing is persisted"""
    return RegisterResponse(message=f"Registration accepted for {request.username}")


@router.get("/isLogin", response_model=IsLoginResponse)
async def is_login(context: AuthContext = Depends(get_auth_context)):
    """Login status of the presented token; never fails"""
    logged_in = context.principal is not None
    return IsLoginResponse(
        message="Logged in" if logged_in else "Not logged in",
        is_login=logged_in,
        token_value=context.token if logged_in else None,
    )


@router.get("/userInfo", response_model=UserInfoResponse)
async def user_info(principal: Principal = Depends(get_current_principal)):
    return UserInfoResponse(
        login_id=principal.login_id,
        role=principal.role,
        permissions=sorted(principal.permissions),
    )


@router.get("/tokenInfo", response_model=TokenInfoResponse)
async def token_info(
    token: str = Depends(get_current_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await TokenInfoUseCase(uow, ApplicationConfig.TOKEN_HEADER).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    token: str = Depends(get_current_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Logout

    Ends the presented token and destroys its Token-Session. Other tokens of
    the same account stay valid.

    Raises:
        - 401 Unauthorized: Token missing, unknown or already ended
    """
    policy = LogoutPolicy(ApplicationConfig.ACCOUNT_SESSION_LOGOUT_POLICY)
    result = await LogoutUseCase(uow, policy).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
