from fastapi import APIRouter, Depends

from src.api.utils.authorization import get_request_principal
from src.app.use_cases.response import ResourceResponse
from src.domain.principal import Principal

router = APIRouter(prefix="/comment", tags=["Comment"])


@router.get("/list", response_model=ResourceResponse)
async def list_comments(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Comment list",
        operator=principal.login_id,
        data={"comments": ["Great product", "Fast delivery"]},
    )


@router.get("/info/{comment_id}", response_model=ResourceResponse)
async def get_comment(comment_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Comment detail",
        operator=principal.login_id,
        data={"commentId": comment_id, "content": "Great product"},
    )


@router.post("/add", response_model=ResourceResponse)
async def add_comment(principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(message="Comment added", operator=principal.login_id)


@router.delete("/delete/{comment_id}", response_model=ResourceResponse)
async def delete_comment(comment_id: str, principal: Principal = Depends(get_request_principal)):
    return ResourceResponse(
        message="Comment deleted", operator=principal.login_id, data={"commentId": comment_id}
    )
