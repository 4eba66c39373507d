#!/usr/bin/env python3
"""
로컬 개발용 스키마 생성 스크립트

운영 DB는 `alembic upgrade head`로 관리한다. 이 스크립트는 Better Auth가
사용하는 users/sessions/accounts/verifications 와 posts 테이블을
DATABASE_URL에 바로 만든다.

    python scripts/init_db.py           # 없는 테이블만 생성
    python scripts/init_db.py --reset   # 전부 삭제 후 재생성
"""
import argparse
import sys
from pathlib import Path

# 프로젝트 루트를 Python path에 추가
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy import inspect

from app.database import engine, Base
from app.models.user import User  # noqa: F401
from app.models.session import Session  # noqa: F401
from app.models.account import Account  # noqa: F401
from app.models.verification import Verification  # noqa: F401
from app.models.post import Post  # noqa: F401


def init_schema(bind=engine, reset: bool = False) -> list:
    """스키마 생성 후 DB에 존재하는 테이블 이름 목록 반환"""
    if reset:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
    return sorted(inspect(bind).get_table_names())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="session-api 개발용 스키마 생성")
    parser.add_argument("--reset", action="store_true", help="기존 테이블 삭제 후 재생성")
    args = parser.parse_args(argv)

    print(f"🔧 {engine.url.render_as_string(hide_password=True)} 에 스키마 생성 중...")
    tables = init_schema(reset=args.reset)
    print(f"✅ 테이블 {len(tables)}개: {', '.join(tables)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
