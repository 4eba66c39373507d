"""공용 픽스처: 인메모리 SQLite 스키마, 테스트 데이터, API 클라이언트"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.user import User
from app.models.session import Session as UserSession


@pytest.fixture
def engine():
    """테스트마다 새 인메모리 DB (스레드 간 공유)"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """get_db를 테스트 DB로 교체한 TestClient"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(user_id="u1", name="Alice", email="alice@example.com", deleted=False, **kwargs):
        user = User(
            id=user_id,
            name=name,
            email=email,
            email_verified=kwargs.pop("email_verified", True),
            deleted_at=datetime.now(timezone.utc) if deleted else None,
            **kwargs,
        )
        db.add(user)
        db.commit()
        return user

    return _make_user


@pytest.fixture
def make_session(db):
    def _make_session(token="tok1", user_id="u1", expires_in=timedelta(hours=1), session_id=None):
        session = UserSession(
            id=session_id or f"s-{token}",
            user_id=user_id,
            token=token,
            expires_at=datetime.now(timezone.utc) + expires_in,
        )
        db.add(session)
        db.commit()
        return session

    return _make_session
