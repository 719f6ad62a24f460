"""
Guest administration service
"""

import logging

from sqlalchemy.orm import Session

from app.core.db import commit_or_rollback
from app.core.errors import NotFoundError
from app.models import Guest
from app.schemas.guest import (
    AdminGuestResponse,
    AdminGuestsListResponse,
    AdminRsvpSummary,
    CreateGuestResponse,
    GuestCreate,
    GuestUpdate,
)
from app.services.invite_code_service import InviteCodeService
from app.services.repositories import GuestRepo, InviteCodeRepo, RsvpRepo

logger = logging.getLogger(__name__)

class GuestService:
    """Service for administrator guest management"""

    @staticmethod
    def get_or_404(db: Session, guest_id: int) -> Guest:
        guest = GuestRepo.get_by_id(db, guest_id)
        if not guest:
            raise NotFoundError("Guest not found")
        return guest

    @staticmethod
    def build_guest_response(db: Session, guest: Guest) -> AdminGuestResponse:
        """Guest with current invite code and RSVP summary"""
        invite = InviteCodeRepo.guest_code(db, guest.id)
        rsvp = RsvpRepo.get_for_guest(db, guest.id)

        if rsvp is not None:
            attending, not_attending = RsvpRepo.attendance_counts(db, rsvp.id)
            summary = AdminRsvpSummary(
                has_responded=True,
                responded_at=rsvp.responded_at,
                attending_count=attending,
                not_attending_count=not_attending,
            )
        else:
            summary = AdminRsvpSummary(has_responded=False)

        return AdminGuestResponse(
            id=guest.id,
            name=guest.name,
            party_size=guest.party_size,
            invite_code=invite.code if invite else None,
            rsvp=summary,
            created_at=guest.created_at,
        )

    @staticmethod
    def list_guests(db: Session) -> AdminGuestsListResponse:
        guests = GuestRepo.list_newest_first(db)
        return AdminGuestsListResponse(
            guests=[GuestService.build_guest_response(db, guest) for guest in guests],
            total=len(guests),
        )

    @staticmethod
    def create_guest(db: Session, guest_in: GuestCreate) -> CreateGuestResponse:
        """Create a guest and its invite code in one transaction"""
        guest = GuestRepo.add(db, guest_in.name, guest_in.party_size)
        invite = InviteCodeService.add_guest_code(db, guest)
        commit_or_rollback(db, "create guest")

        logger.info(f"Created guest {guest.id} with party size {guest.party_size}")
        return CreateGuestResponse(
            id=guest.id,
            name=guest.name,
            party_size=guest.party_size,
            invite_code=invite.code,
        )

    @staticmethod
    def update_guest(db: Session, guest_id: int, guest_update: GuestUpdate) -> AdminGuestResponse:
        guest = GuestService.get_or_404(db, guest_id)
        guest.name = guest_update.name
        guest.party_size = guest_update.party_size
        commit_or_rollback(db, "update guest")
        db.refresh(guest)
        return GuestService.build_guest_response(db, guest)

    @staticmethod
    def delete_guest(db: Session, guest_id: int) -> None:
        """Delete a guest; codes, sessions and RSVP go with it"""
        guest = GuestService.get_or_404(db, guest_id)
        db.delete(guest)
        commit_or_rollback(db, "delete guest")
        logger.info(f"Deleted guest {guest_id}")

    @staticmethod
    def regenerate_code(db: Session, guest_id: int) -> str:
        guest = GuestService.get_or_404(db, guest_id)
        return InviteCodeService.regenerate_guest_code(db, guest).code

    @staticmethod
    def invite_code_for(db: Session, guest_id: int) -> str:
        guest = GuestService.get_or_404(db, guest_id)
        invite = InviteCodeRepo.guest_code(db, guest.id)
        if not invite:
            raise NotFoundError("Invite code not found")
        return invite.code
