"""
Per-route authorization

Each route binds its predicate at registration with require(...). The paths
are public in the central table, so the bound predicate is the only check.
"""

from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal, require
from src.app.use_cases.response import ResourceResponse
from src.domain.predicates import (
    CheckMode,
    RequireBoth,
    RequireLogin,
    RequirePermission,
    RequireRole,
)
from src.domain.principal import Principal

basic_router = APIRouter(prefix="/basic", tags=["Annotation"])
advanced_router = APIRouter(prefix="/advanced", tags=["Annotation"])


@basic_router.get(
    "/info",
    response_model=ResourceResponse,
    dependencies=[Depends(require(RequireLogin()))],
)
async def basic_info(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Logged in", operator=principal.login_id)


@basic_router.get(
    "/add",
    response_model=ResourceResponse,
    dependencies=[Depends(require(RequireRole(roles={"super-admin"})))],
)
async def basic_add(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Role super-admin verified", operator=principal.login_id)


@basic_router.get(
    "/userAdd",
    response_model=ResourceResponse,
    dependencies=[Depends(require(RequirePermission(permissions={"user"})))],
)
async def basic_user_add(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Permission user verified", operator=principal.login_id)


@advanced_router.get(
    "/anyOf",
    response_model=ResourceResponse,
    dependencies=[
        Depends(require(RequirePermission(permissions={"notice", "comment"}, mode=CheckMode.OR)))
    ],
)
async def any_of(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Permission notice or comment verified", operator=principal.login_id)


@advanced_router.get(
    "/allOf",
    response_model=ResourceResponse,
    dependencies=[
        Depends(require(RequirePermission(permissions={"goods", "orders"}, mode=CheckMode.AND)))
    ],
)
async def all_of(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Permissions goods and orders verified", operator=principal.login_id)


@advanced_router.get(
    "/orRole",
    response_model=ResourceResponse,
    dependencies=[
        Depends(require(RequirePermission(permissions={"notice"}, or_roles={"admin"})))
    ],
)
async def or_role(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Permission notice or role admin verified", operator=principal.login_id)


@advanced_router.get(
    "/both",
    response_model=ResourceResponse,
    dependencies=[
        Depends(
            require(RequireBoth(roles={"admin", "super-admin"}, permissions={"admin"}))
        )
    ],
)
async def both(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Role and permission verified", operator=principal.login_id)
