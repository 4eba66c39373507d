from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.auth import require_auth
from app.services.session_resolver import AuthUser

# 라우터 전체에 필수 인증 적용
router = APIRouter(dependencies=[Depends(require_auth)])


class MeResponse(BaseModel):
    id: str
    name: str
    email: str
    email_verified: bool
    image: Optional[str]


@router.get("/me", response_model=MeResponse)
async def get_current_user_info(current_user: AuthUser = Depends(require_auth)):
    """현재 로그인한 사용자 정보 조회"""
    return MeResponse(**current_user.model_dump())
