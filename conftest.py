"""session-api pytest 설정"""
import os

# =============================================================================
# 테스트 환경 변수
# =============================================================================
# 설정은 import 시점에 읽히므로 app 모듈 import 전에 환경을 준비한다
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("FRONTEND_URL", "http://localhost:3050")
