"""
Guest-related Pydantic schemas
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

class GuestCreate(BaseModel):
    """Schema for creating a guest"""
    name: str = Field(..., min_length=1, max_length=100)
    party_size: int = Field(..., ge=1, le=20)

class GuestUpdate(GuestCreate):
    """Schema for updating a guest"""

class CreateGuestResponse(BaseModel):
    id: int
    name: str
    party_size: int
    invite_code: str

class AdminRsvpSummary(BaseModel):
    has_responded: bool
    responded_at: Optional[datetime] = None
    attending_count: int = 0
    not_attending_count: int = 0

class AdminGuestResponse(BaseModel):
    """Guest as seen by an administrator"""
    id: int
    name: str
    party_size: int
    invite_code: Optional[str] = None
    rsvp: AdminRsvpSummary
    created_at: datetime

class AdminGuestsListResponse(BaseModel):
    guests: List[AdminGuestResponse]
    total: int

class GenerateCodeResponse(BaseModel):
    invite_code: str
