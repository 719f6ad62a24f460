"""
Admin dashboard and settings schemas
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=256)

class RecentRsvp(BaseModel):
    guest_name: str
    responded_at: datetime
    attending_count: int
    not_attending_count: int

class DashboardStatsResponse(BaseModel):
    """Aggregate RSVP figures for the admin dashboard"""
    total_guests: int
    total_expected_attendees: int
    rsvp_count: int
    pending_rsvps: int
    attending_count: int
    not_attending_count: int
    recent_rsvps: List[RecentRsvp]
