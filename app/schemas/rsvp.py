"""
RSVP-related Pydantic schemas
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

class AttendeeInput(BaseModel):
    """A single attendee in an RSVP submission"""
    name: str = Field(..., min_length=1, max_length=100)
    is_attending: bool
    meal_preference: Optional[str] = None
    dietary_restrictions: Optional[str] = Field(None, max_length=500)
    is_primary: bool = False

class SubmitRsvpRequest(BaseModel):
    """Submit or replace an RSVP"""
    attendees: List[AttendeeInput] = Field(..., min_length=1)

class AttendeeResponse(BaseModel):
    id: int
    name: str
    is_attending: bool
    meal_preference: Optional[str] = None
    dietary_restrictions: Optional[str] = None
    is_primary: bool

    class Config:
        from_attributes = True

class RsvpResponse(BaseModel):
    id: int
    guest_id: int
    responded_at: datetime
    attendees: List[AttendeeResponse]

    class Config:
        from_attributes = True

class RsvpStatusResponse(BaseModel):
    """RSVP status for the current guest"""
    has_responded: bool
    party_size: int
    guest_name: str
    rsvp: Optional[RsvpResponse] = None
