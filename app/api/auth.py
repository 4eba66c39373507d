from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.session_resolver import AuthUser, Clock, resolve_session, utc_now
from app.services.stores import SqlSessionStore, SqlUserStore


class AuthenticationRequired(Exception):
    """필수 인증 실패. 앱 예외 핸들러가 본문 없는 401로 변환한다."""


def get_clock() -> Clock:
    return utc_now


# 의존성: 현재 사용자 조회 (선택 인증)
# 동기 DB 조회: 스레드풀에서 실행되도록 def
def get_optional_user(
    request: Request,
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> Optional[AuthUser]:
    """Better Auth 세션 쿠키로 사용자 조회, 실패 시 None"""
    return resolve_session(
        request.cookies,
        clock=clock,
        user_store=SqlUserStore(db),
        session_store=SqlSessionStore(db),
    )


# 의존성: 로그인 필수
def require_auth(
    request: Request,
    current_user: Optional[AuthUser] = Depends(get_optional_user),
) -> AuthUser:
    """인증이 필요한 엔드포인트용 의존성"""
    if current_user is None:
        raise AuthenticationRequired()

    request.state.auth_user = current_user
    return current_user
