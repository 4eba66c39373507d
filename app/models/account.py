from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Account(Base):
    """외부 프로바이더(OAuth, 이메일/비밀번호) 연결 정보. Better Auth가 관리한다."""
    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    account_id = Column(String, nullable=False)
    provider_id = Column(String, nullable=False)  # 'google', 'credential' ...
    access_token = Column(String, nullable=True)
    refresh_token = Column(String, nullable=True)
    access_token_expires_at = Column(DateTime(timezone=True), nullable=True)
    refresh_token_expires_at = Column(DateTime(timezone=True), nullable=True)
    scope = Column(String, nullable=True)
    id_token = Column(String, nullable=True)
    password = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="accounts")

    __table_args__ = (
        Index("idx_accounts_provider_account", "provider_id", "account_id", unique=True),
        Index("idx_accounts_user_id", "user_id"),
    )
