"""Better Auth 세션 쿠키 → 인증 사용자 해석

세션 생성/갱신/삭제는 Better Auth(프론트엔드)가 담당하고, 이 서비스는
쿠키에 담긴 토큰으로 sessions/users 테이블을 읽기만 한다.
"""
import logging
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from app.services.stores import SessionStore, UserStore

logger = logging.getLogger(__name__)

# Better Auth가 설정하는 쿠키 이름, 값은 "{token}.{signature}"
SESSION_COOKIE_NAME = "better-auth.session_token"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AuthUser(BaseModel):
    """인증된 사용자 정보"""
    id: str
    name: str
    email: str
    email_verified: bool
    image: Optional[str] = None

    model_config = {"from_attributes": True, "frozen": True}


def extract_session_token(cookies: Mapping[str, str]) -> Optional[str]:
    """쿠키에서 토큰 부분만 추출 (서명은 검증하지 않고 버린다)"""
    value = cookies.get(SESSION_COOKIE_NAME)
    if not value:
        return None
    return value.split(".", 1)[0]


def resolve_session(
    cookies: Mapping[str, str],
    clock: Clock,
    user_store: UserStore,
    session_store: SessionStore,
) -> Optional[AuthUser]:
    """쿠키로 세션과 사용자를 조회해 AuthUser 반환, 실패 사유와 관계없이 None"""
    token = extract_session_token(cookies)
    if token is None:
        return None

    try:
        session = session_store.find_by_token(token)
    except SQLAlchemyError as e:
        logger.warning("Session lookup failed: %r", e)
        return None

    if session is None:
        logger.debug("No session for token")
        return None

    try:
        expired = session.is_expired(clock())
    except (TypeError, AttributeError) as e:
        logger.warning("Session %s has unreadable expiry %r: %r", session.id, session.expires_at, e)
        return None

    if expired:
        logger.debug("Session %s expired at %s", session.id, session.expires_at)
        return None

    try:
        user = user_store.find_by_id(session.user_id)
    except SQLAlchemyError as e:
        logger.warning("User lookup failed for session %s: %r", session.id, e)
        return None

    if user is None:
        logger.debug("Session %s points at missing user %s", session.id, session.user_id)
        return None

    if user.is_deleted:
        logger.debug("User %s is deleted", user.id)
        return None

    return AuthUser.model_validate(user)
