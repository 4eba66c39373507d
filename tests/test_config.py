"""설정 로드 및 시작 시 검증 테스트"""
import logging

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings, load_settings
from app.logging_config import configure_logging


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """.env 파일과 캐시된 설정으로부터 격리"""
    monkeypatch.chdir(tmp_path)
    for name in ("FRONTEND_URL", "SERVER_PORT", "LOG_LEVEL", "LOG_FILE", "DEBUG", "HOST"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql://localhost/app")

        settings = Settings()

        assert settings.database_url == "postgresql://localhost/app"
        assert settings.frontend_url == "http://localhost:3050"
        assert settings.server_port == 3051
        assert settings.log_file is None

    def test_reads_environment(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite://")
        clean_env.setenv("FRONTEND_URL", "https://app.example.com")
        clean_env.setenv("SERVER_PORT", "8080")

        settings = Settings()

        assert settings.frontend_url == "https://app.example.com"
        assert settings.server_port == 8080

    def test_database_url_required(self, clean_env):
        clean_env.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings()

    @pytest.mark.parametrize("port", ["0", "70000", "not-a-port"])
    def test_invalid_port_rejected(self, clean_env, port):
        clean_env.setenv("DATABASE_URL", "sqlite://")
        clean_env.setenv("SERVER_PORT", port)

        with pytest.raises(ValidationError):
            Settings()


class TestLoadSettings:
    def test_missing_database_url_exits(self, clean_env, caplog):
        clean_env.delenv("DATABASE_URL", raising=False)

        with caplog.at_level(logging.CRITICAL, logger="app.config"):
            with pytest.raises(SystemExit) as exc_info:
                load_settings()

        assert exc_info.value.code == 1
        assert "Invalid configuration" in caplog.text

    def test_returns_cached_settings(self, clean_env):
        clean_env.setenv("DATABASE_URL", "sqlite://")

        assert load_settings() is load_settings()


class TestConfigureLogging:
    def test_writes_log_file(self, clean_env, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        settings = Settings(database_url="sqlite://", log_level="debug", log_file=str(log_file))

        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging(settings)
            logging.getLogger("app.test").info("hello from test")
            for handler in root.handlers:
                handler.flush()
        finally:
            for handler in root.handlers:
                if handler not in saved_handlers:
                    handler.close()
            root.handlers = saved_handlers
            root.setLevel(saved_level)

        assert "hello from test" in log_file.read_text(encoding="utf-8")
