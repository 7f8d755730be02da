from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal
from src.app.use_cases.response import ResourceResponse
from src.domain.principal import Principal

router = APIRouter(prefix="/notice", tags=["Notice"])


@router.get("/list", response_model=ResourceResponse)
async def list_notices(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Notice list",
        operator=principal.login_id,
        data={"notices": ["Maintenance window on Sunday", "New release available"]},
    )


@router.get("/info/{notice_id}", response_model=ResourceResponse)
async def get_notice(notice_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Notice detail",
        operator=principal.login_id,
        data={"noticeId": notice_id, "title": "Maintenance window on Sunday"},
    )


@router.post("/publish", response_model=ResourceResponse)
async def publish_notice(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Notice published", operator=principal.login_id)


@router.delete("/delete/{notice_id}", response_model=ResourceResponse)
async def delete_notice(notice_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Notice deleted", operator=principal.login_id, data={"noticeId": notice_id}
    )
