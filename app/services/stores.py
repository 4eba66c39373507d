from typing import Optional, Protocol

from sqlalchemy.orm import Session

from app.models.session import Session as UserSession
from app.models.user import User


class SessionStore(Protocol):
    def find_by_token(self, token: str) -> Optional[UserSession]:
        ...


class UserStore(Protocol):
    def find_by_id(self, user_id: str) -> Optional[User]:
        ...


class SqlSessionStore:
    """sessions 테이블 조회 (읽기 전용)"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_token(self, token: str) -> Optional[UserSession]:
        return self.db.query(UserSession).filter(UserSession.token == token).first()


class SqlUserStore:
    """users 테이블 조회 (읽기 전용)"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.get(User, user_id)
