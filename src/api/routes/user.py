from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal
from src.app.use_cases.response import ResourceResponse
from src.domain.principal import Principal

router = APIRouter(prefix="/user", tags=["User"])

_USERS = ["user", "admin", "super-admin", "goods-admin"]


@router.get("/list", response_model=ResourceResponse)
async def list_users(principal: Principal = Depends(get_request_principal)):
    """Requires permission `user` (route table)"""
    return ResourceResponse(
        message="User list", operator=principal.login_id, data={"users": _USERS}
    )


@router.get("/info/{username}", response_model=ResourceResponse)
async def get_user(username: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="User detail",
        operator=principal.login_id,
        data={"username": username, "email": f"{username}@example.com"},
    )


@router.post("/create", response_model=ResourceResponse)
async def create_user(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="User created", operator=principal.login_id)


@router.put("/update", response_model=ResourceResponse)
async def update_user(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="User updated", operator=principal.login_id)


@router.delete("/delete", response_model=ResourceResponse)
async def delete_user(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="User deleted", operator=principal.login_id)
