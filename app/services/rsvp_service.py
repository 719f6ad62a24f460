"""
RSVP write coordinator and read path
"""

import logging
from typing import List, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.db import utcnow
from app.core.errors import BadRequestError, DatabaseError, InternalError, NotFoundError
from app.models import MEAL_PREFERENCES, AuthSession, Guest, Rsvp, RsvpAttendee, SessionType
from app.schemas.rsvp import AttendeeInput, AttendeeResponse, RsvpResponse, RsvpStatusResponse
from app.services.auth_service import AuthService
from app.services.repositories import GuestRepo, RsvpRepo

logger = logging.getLogger(__name__)

class RsvpService:
    """Service for submitting and reading a guest party's RSVP"""

    @staticmethod
    def guest_for_session(db: Session, session: AuthSession) -> Guest:
        """Guest bound to a guest session"""
        session = AuthService.require(session, SessionType.GUEST)
        if session.guest_id is None:
            raise InternalError("Guest session missing guest_id")

        guest = GuestRepo.get_by_id(db, session.guest_id)
        if not guest:
            raise NotFoundError("Guest not found")
        return guest

    @staticmethod
    def validate_submission(guest: Guest, attendees: Sequence[AttendeeInput]) -> None:
        """Reject submissions that break the party rules; nothing is written"""
        if len(attendees) > guest.party_size:
            raise BadRequestError(f"Cannot have more than {guest.party_size} attendees")

        primary_count = sum(1 for attendee in attendees if attendee.is_primary)
        if primary_count != 1:
            raise BadRequestError("Exactly one attendee must be marked as primary")

        for attendee in attendees:
            meal = attendee.meal_preference
            if meal is not None and meal not in MEAL_PREFERENCES:
                raise BadRequestError(f"Invalid meal preference: {meal}")

    @staticmethod
    def submit(db: Session, guest: Guest, attendees: Sequence[AttendeeInput]) -> RsvpResponse:
        """Replace the guest's RSVP with the submitted attendee list.

        The old RSVP (attendees cascade with it) is deleted and a new one
        inserted in a single transaction, so readers see either the previous
        answer or the new one in full.
        """
        RsvpService.validate_submission(guest, attendees)

        try:
            existing = RsvpRepo.get_for_guest(db, guest.id)
            if existing is not None:
                db.delete(existing)
                # Delete must reach the store before the insert reuses guest_id
                db.flush()

            now = utcnow()
            rsvp = Rsvp(guest_id=guest.id, responded_at=now, created_at=now, updated_at=now)
            db.add(rsvp)
            db.flush()

            for attendee in attendees:
                db.add(RsvpAttendee(
                    rsvp_id=rsvp.id,
                    name=attendee.name,
                    is_attending=attendee.is_attending,
                    meal_preference=attendee.meal_preference,
                    dietary_restrictions=attendee.dietary_restrictions,
                    is_primary=attendee.is_primary,
                ))

            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise DatabaseError(f"Failed to save RSVP for guest {guest.id}: {exc}") from exc

        logger.info(
            f"Guest {guest.id} submitted RSVP {rsvp.id} with {len(attendees)} attendee(s)"
            f"{' (replaced previous answer)' if existing is not None else ''}"
        )
        return RsvpService.to_response(db, rsvp)

    @staticmethod
    def to_response(db: Session, rsvp: Rsvp) -> RsvpResponse:
        attendees: List[RsvpAttendee] = RsvpRepo.list_attendees(db, rsvp.id)
        return RsvpResponse(
            id=rsvp.id,
            guest_id=rsvp.guest_id,
            responded_at=rsvp.responded_at,
            attendees=[AttendeeResponse.model_validate(attendee) for attendee in attendees],
        )

    @staticmethod
    def status(db: Session, guest: Guest) -> RsvpStatusResponse:
        """Whether the guest has answered and, if so, the attendee list"""
        rsvp = RsvpRepo.get_for_guest(db, guest.id)
        return RsvpStatusResponse(
            has_responded=rsvp is not None,
            party_size=guest.party_size,
            guest_name=guest.name,
            rsvp=RsvpService.to_response(db, rsvp) if rsvp is not None else None,
        )
