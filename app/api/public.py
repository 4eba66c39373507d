from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.api.auth import get_optional_user
from app.services.session_resolver import AuthUser

router = APIRouter()


class HealthResponse(BaseModel):
    status: str


class GreetingResponse(BaseModel):
    message: str
    user_name: Optional[str]
    is_logged_in: bool


# 헬스 체크
@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok")


@router.get("/greeting", response_model=GreetingResponse)
async def greeting(current_user: Optional[AuthUser] = Depends(get_optional_user)):
    """로그인 여부에 따라 인사말 반환 (비로그인도 200)"""
    if current_user:
        return GreetingResponse(
            message=f"Hello, {current_user.name}!",
            user_name=current_user.name,
            is_logged_in=True,
        )
    return GreetingResponse(message="Hello, guest!", user_name=None, is_logged_in=False)
