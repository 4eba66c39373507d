from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class Verification(Base):
    __tablename__ = "verifications"

    id = Column(String, primary_key=True)
    identifier = Column(String, nullable=False)  # 이메일 인증, 비밀번호 재설정 등
    value = Column(String, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_verifications_identifier", "identifier"),
        Index("idx_verifications_expires_at", "expires_at"),
    )
