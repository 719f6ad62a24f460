"""
Repository layer wrapping the SQLAlchemy queries used by the services.

Repositories only read and stage changes; committing is left to the calling
service so that multi-step writes share one transaction.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.models import (
    Admin,
    AuthSession,
    CodeType,
    Event,
    Guest,
    InviteCode,
    Rsvp,
    RsvpAttendee,
)


# -------- Guest repository --------

class GuestRepo:
    @staticmethod
    def get_by_id(db: Session, guest_id: int) -> Optional[Guest]:
        return db.query(Guest).filter(Guest.id == guest_id).first()

    @staticmethod
    def list_newest_first(db: Session) -> List[Guest]:
        return db.query(Guest).order_by(Guest.created_at.desc(), Guest.id.desc()).all()

    @staticmethod
    def add(db: Session, name: str, party_size: int) -> Guest:
        guest = Guest(name=name, party_size=party_size)
        db.add(guest)
        db.flush()
        return guest


# -------- Admin repository --------

class AdminRepo:
    @staticmethod
    def get_by_id(db: Session, admin_id: int) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.id == admin_id).first()

    @staticmethod
    def get_by_username(db: Session, username: str) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.username == username).first()


# -------- Invite code repository --------

class InviteCodeRepo:
    @staticmethod
    def get_by_code(db: Session, code: str) -> Optional[InviteCode]:
        return db.query(InviteCode).filter(InviteCode.code == code).first()

    @staticmethod
    def exists(db: Session, code: str) -> bool:
        return db.query(InviteCode.id).filter(InviteCode.code == code).first() is not None

    @staticmethod
    def guest_code(db: Session, guest_id: int) -> Optional[InviteCode]:
        return db.query(InviteCode).filter(
            InviteCode.guest_id == guest_id,
            InviteCode.code_type == CodeType.GUEST.value
        ).order_by(InviteCode.created_at.desc()).first()

    @staticmethod
    def delete_guest_codes(db: Session, guest_id: int) -> int:
        return db.query(InviteCode).filter(
            InviteCode.guest_id == guest_id,
            InviteCode.code_type == CodeType.GUEST.value
        ).delete(synchronize_session=False)


# -------- Session repository --------

class SessionRepo:
    @staticmethod
    def get_live_by_token(db: Session, token: str, now: datetime) -> Optional[AuthSession]:
        return db.query(AuthSession).filter(
            AuthSession.token == token,
            AuthSession.expires_at > now
        ).first()


# -------- RSVP repository --------

class RsvpRepo:
    @staticmethod
    def get_for_guest(db: Session, guest_id: int) -> Optional[Rsvp]:
        return db.query(Rsvp).filter(Rsvp.guest_id == guest_id).first()

    @staticmethod
    def list_attendees(db: Session, rsvp_id: int) -> List[RsvpAttendee]:
        """Attendees of an RSVP, primary first then by name"""
        return db.query(RsvpAttendee).filter(
            RsvpAttendee.rsvp_id == rsvp_id
        ).order_by(RsvpAttendee.is_primary.desc(), RsvpAttendee.name).all()

    @staticmethod
    def attendance_counts(db: Session, rsvp_id: Optional[int] = None) -> tuple[int, int]:
        """(attending, not attending) across one RSVP, or all of them"""
        query = db.query(
            func.coalesce(func.sum(case((RsvpAttendee.is_attending, 1), else_=0)), 0),
            func.coalesce(func.sum(case((~RsvpAttendee.is_attending, 1), else_=0)), 0),
        )
        if rsvp_id is not None:
            query = query.filter(RsvpAttendee.rsvp_id == rsvp_id)
        attending, not_attending = query.one()
        return int(attending), int(not_attending)


# -------- Event repository --------

class EventRepo:
    @staticmethod
    def get_by_id(db: Session, event_id: int) -> Optional[Event]:
        return db.query(Event).filter(Event.id == event_id).first()

    @staticmethod
    def list_ordered(db: Session) -> List[Event]:
        return db.query(Event).order_by(
            Event.display_order, Event.event_date, Event.event_time
        ).all()
