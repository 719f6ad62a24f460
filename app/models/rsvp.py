"""
RSVP and attendee models
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.db import Base, utcnow

MEAL_PREFERENCES = ("beef", "chicken", "fish", "vegetarian", "vegan")

class Rsvp(Base):
    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True, index=True)
    guest_id = Column(Integer, ForeignKey("guests.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    responded_at = Column(DateTime, default=utcnow, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    guest = relationship("Guest", back_populates="rsvp")
    attendees = relationship(
        "RsvpAttendee",
        back_populates="rsvp",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Replaced rows never hand their ids to the replacement
    __table_args__ = ({"sqlite_autoincrement": True},)

class RsvpAttendee(Base):
    __tablename__ = "rsvp_attendees"

    id = Column(Integer, primary_key=True, index=True)
    rsvp_id = Column(Integer, ForeignKey("rsvps.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    is_attending = Column(Boolean, nullable=False)
    meal_preference = Column(String(20), nullable=True)
    dietary_restrictions = Column(Text, nullable=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    rsvp = relationship("Rsvp", back_populates="attendees")

    __table_args__ = (
        CheckConstraint(
            "meal_preference IS NULL OR meal_preference IN ('beef', 'chicken', 'fish', 'vegetarian', 'vegan')",
            name="rsvp_attendees_meal_preference_check",
        ),
        {"sqlite_autoincrement": True},
    )
