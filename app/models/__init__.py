"""
Database models package
"""

from .guest import Guest
from .admin import Admin
from .invite_code import CodeType, InviteCode
from .session import AuthSession, SessionType
from .rsvp import MEAL_PREFERENCES, Rsvp, RsvpAttendee
from .event import EVENT_TYPES, Event

__all__ = [
    "Guest",
    "Admin",
    "CodeType",
    "InviteCode",
    "AuthSession",
    "SessionType",
    "MEAL_PREFERENCES",
    "Rsvp",
    "RsvpAttendee",
    "EVENT_TYPES",
    "Event",
]
