"""
Invite code model
"""

from enum import Enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base, utcnow
from app.core.errors import InternalError

class CodeType(str, Enum):
    """What redeeming a code grants"""
    GUEST = "guest"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str) -> "CodeType":
        try:
            return cls(value)
        except ValueError:
            raise InternalError(f"Invalid code type in database: {value!r}")

class InviteCode(Base):
    __tablename__ = "invite_codes"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String(50), unique=True, nullable=False, index=True)
    code_type = Column(String(20), nullable=False)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    guest = relationship("Guest", back_populates="invite_codes")

    __table_args__ = (
        CheckConstraint("code_type IN ('guest', 'admin')", name="invite_codes_code_type_check"),
    )

    @property
    def kind(self) -> CodeType:
        return CodeType.parse(self.code_type)
