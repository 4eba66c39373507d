import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Database
    database_url: str

    # App
    debug: bool = False
    host: str = "0.0.0.0"
    server_port: int = Field(default=3051, ge=1, le=65535)

    # CORS
    frontend_url: str = "http://localhost:3050"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


def load_settings() -> Settings:
    """설정 로드, 필수 값 누락/잘못된 값이면 진단 메시지를 남기고 종료"""
    try:
        return get_settings()
    except ValidationError as e:
        logger.critical("Invalid configuration:\n%s", e)
        raise SystemExit(1)
