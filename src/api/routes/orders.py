from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal
from src.app.use_cases.response import ResourceResponse
from src.domain.principal import Principal

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("/list", response_model=ResourceResponse)
async def list_orders(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Order list",
        operator=principal.login_id,
        data={"orders": ["ORD-1001", "ORD-1002", "ORD-1003"]},
    )


@router.get("/info/{order_id}", response_model=ResourceResponse)
async def get_order(order_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Order detail",
        operator=principal.login_id,
        data={"orderId": order_id, "status": "paid", "amount": 7999},
    )


@router.post("/create", response_model=ResourceResponse)
async def create_order(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Order created", operator=principal.login_id)


@router.put("/cancel/{order_id}", response_model=ResourceResponse)
async def cancel_order(order_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Order cancelled", operator=principal.login_id, data={"orderId": order_id}
    )
