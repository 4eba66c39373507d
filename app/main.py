import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from app.config import load_settings
from app.logging_config import configure_logging

# DB 엔진 생성 전에 설정 검증 (DATABASE_URL 누락 시 시작 중단)
settings = load_settings()

# ORM 매퍼 등록 (relationship 문자열 참조 해석용)
from app.models.user import User  # noqa: F401
from app.models.session import Session  # noqa: F401
from app.models.account import Account  # noqa: F401
from app.models.verification import Verification  # noqa: F401
from app.models.post import Post  # noqa: F401

from app.api import public, protected
from app.api.auth import AuthenticationRequired

logger = logging.getLogger(__name__)

# FastAPI 앱 생성
app = FastAPI(
    title="session-api",
    description="Session-authenticated API backed by Better Auth cookies",
    version="0.1.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# 미들웨어 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(public.router, prefix="/api", tags=["public"])
app.include_router(protected.router, prefix="/api", tags=["protected"])


# 필수 인증 실패는 사유와 관계없이 본문 없는 401
@app.exception_handler(AuthenticationRequired)
async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


# 애플리케이션 시작 이벤트
@app.on_event("startup")
async def startup_event():
    configure_logging(settings)
    logger.info("session-api started (frontend origin: %s)", settings.frontend_url)


def run():
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.server_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
