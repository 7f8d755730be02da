from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal
from src.app.use_cases.response import ResourceResponse
from src.domain.principal import Principal

router = APIRouter(prefix="/goods", tags=["Goods"])


@router.get("/list", response_model=ResourceResponse)
async def list_goods(principal: Principal = Depends(get_request_principal)):
    """Requires permission `goods` (route table)"""
    return ResourceResponse(
        message="Goods list",
        operator=principal.login_id,
        data={"goods": ["iPhone 15 Pro", "MacBook Pro", "AirPods Pro", "iPad Pro"]},
    )


@router.get("/info/{goods_id}", response_model=ResourceResponse)
async def get_goods(goods_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Goods detail",
        operator=principal.login_id,
        data={"goodsId": goods_id, "name": "iPhone 15 Pro", "price": 7999},
    )


@router.post("/add", response_model=ResourceResponse)
async def add_goods(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Goods added", operator=principal.login_id)


@router.put("/update", response_model=ResourceResponse)
async def update_goods(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Goods updated", operator=principal.login_id)


@router.delete("/delete/{goods_id}", response_model=ResourceResponse)
async def delete_goods(goods_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Goods deleted", operator=principal.login_id, data={"goodsId": goods_id}
    )
