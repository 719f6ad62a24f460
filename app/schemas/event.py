"""
Event-related Pydantic schemas
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

EventType = Literal["ceremony", "reception", "rehearsal", "welcome", "brunch", "other"]

class EventCreate(BaseModel):
    """Schema for creating an event"""
    name: str = Field(..., min_length=1, max_length=255)
    event_type: EventType
    event_date: str = Field(..., description="YYYY-MM-DD")
    event_time: str = Field(..., description="HH:MM")
    location_name: str = Field(..., min_length=1, max_length=255)
    location_address: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = Field(None, max_length=2000)
    display_order: int = 0

class EventUpdate(EventCreate):
    """Schema for updating an event"""

class EventResponse(BaseModel):
    """Public event response"""
    id: int
    name: str
    event_type: str
    event_date: str
    event_time: str
    location_name: str
    location_address: str
    description: Optional[str] = None

class AdminEventResponse(EventResponse):
    """Event response with admin-only fields"""
    display_order: int

class EventsListResponse(BaseModel):
    events: List[EventResponse]

class AdminEventsListResponse(BaseModel):
    events: List[AdminEventResponse]
