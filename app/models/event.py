"""
Event model
"""

from sqlalchemy import Column, Integer, String, Text, Date, Time, DateTime

from app.core.db import Base, utcnow

EVENT_TYPES = ("ceremony", "reception", "rehearsal", "welcome", "brunch", "other")

class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    event_type = Column(String(20), nullable=False)
    event_date = Column(Date, nullable=False)
    event_time = Column(Time, nullable=False)
    location_name = Column(String(255), nullable=False)
    location_address = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
