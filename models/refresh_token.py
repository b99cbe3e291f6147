"""
RefreshToken model: one row per issued refresh token so it can be revoked.
Fields:
- token (unique) - 64 hex chars
- user_id (String(36)) - FK to users.id
- expires_at
- revoked_at (null until revoked)
- created_at, updated_at
"""
from sqlalchemy import Column, String, DateTime, ForeignKey
from models.base_model import BaseModel, Base


class RefreshToken(BaseModel, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(64), nullable=False, unique=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<RefreshToken user={self.user_id} revoked={self.revoked_at is not None}>"
