"""
Combined authorization

The route table requires login under /combined and the router repeats it,
while single routes add their own predicates on top. An endpoint marked with
ignore_authorization skips all of them.
"""

from fastapi import APIRouter, Depends, Request

from src.api.utils.authorization import get_request_principal, ignore_authorization, require
from src.app.use_cases.response import ApiResponse, ResourceResponse
from src.domain.predicates import RequireAny, RequireLogin, RequirePermission, RequireRole
from src.domain.principal import Principal

router = APIRouter(
    prefix="/combined",
    tags=["Combined"],
    dependencies=[Depends(require(RequireLogin()))],
)


@router.get("/health", response_model=ApiResponse)
@ignore_authorization
async def combined_health(request: Request):
    principal = request.state.principal
    return ApiResponse(
        message=f"Open to {principal.login_id if principal else 'anonymous'}"
    )


@router.get("/normal", response_model=ResourceResponse)
async def normal(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Logged in", operator=principal.login_id)


@router.get(
    "/anyOf",
    response_model=ResourceResponse,
    dependencies=[
        Depends(
            require(
                RequireAny(
                    any_of=(
                        RequireRole(roles={"super-admin"}),
                        RequirePermission(permissions={"goods"}),
                    )
                )
            )
        )
    ],
)
async def any_of(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Role super-admin or permission goods verified", operator=principal.login_id
    )


@router.get(
    "/adminOnly",
    response_model=ResourceResponse,
    dependencies=[Depends(require(RequireRole(roles={"admin"})))],
)
async def admin_only(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Role admin verified", operator=principal.login_id)
