"""
Pydantic schemas package
"""

from .common import *
from .auth import *
from .rsvp import *
from .guest import *
from .event import *
from .admin import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "ValidateCodeRequest",
    "ValidateCodeResponse",
    "AdminLoginRequest",
    "AdminLoginResponse",
    "SessionResponse",
    "AttendeeInput",
    "SubmitRsvpRequest",
    "AttendeeResponse",
    "RsvpResponse",
    "RsvpStatusResponse",
    "GuestCreate",
    "GuestUpdate",
    "CreateGuestResponse",
    "AdminRsvpSummary",
    "AdminGuestResponse",
    "AdminGuestsListResponse",
    "GenerateCodeResponse",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "AdminEventResponse",
    "EventsListResponse",
    "AdminEventsListResponse",
    "ChangePasswordRequest",
    "RecentRsvp",
    "DashboardStatsResponse",
]
