"""
Authentication session model
"""

from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base, utcnow
from app.core.errors import InternalError

class SessionType(str, Enum):
    """Authentication state carried by a session"""
    GUEST = "guest"
    ADMIN_PENDING = "admin_pending"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str) -> "SessionType":
        try:
            return cls(value)
        except ValueError:
            raise InternalError(f"Invalid session type in database: {value!r}")

class AuthSession(Base):
    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(String(64), unique=True, nullable=False, index=True)
    session_type = Column(String(20), nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=True)
    admin_id = Column(Integer, ForeignKey("admins.id", ondelete="CASCADE"), nullable=True)
    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    guest = relationship("Guest", back_populates="sessions")
    admin = relationship("Admin", back_populates="sessions")

    __table_args__ = (
        CheckConstraint(
            "session_type IN ('guest', 'admin_pending', 'admin')",
            name="sessions_session_type_check",
        ),
    )

    @property
    def kind(self) -> SessionType:
        return SessionType.parse(self.session_type)
