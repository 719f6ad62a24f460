"""
Guest model
"""

from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base, utcnow

class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    party_size = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    invite_codes = relationship(
        "InviteCode", back_populates="guest", cascade="all, delete-orphan", passive_deletes=True
    )
    sessions = relationship(
        "AuthSession", back_populates="guest", cascade="all, delete-orphan", passive_deletes=True
    )
    rsvp = relationship(
        "Rsvp", back_populates="guest", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("party_size > 0", name="guests_party_size_positive"),
    )
