"""
Guest-facing RSVP routes - require a guest session
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.models import AuthSession
from app.schemas.rsvp import SubmitRsvpRequest
from app.services.rsvp_service import RsvpService
from app.utils.responses import success_response
from app.utils.security import require_guest_session

router = APIRouter()

@router.get("")
def get_rsvp_status(
    session: AuthSession = Depends(require_guest_session),
    db: Session = Depends(get_db)
):
    """RSVP status for the current guest"""
    guest = RsvpService.guest_for_session(db, session)
    return success_response(
        message="RSVP status retrieved",
        data=RsvpService.status(db, guest)
    )

@router.post("")
def submit_rsvp(
    rsvp_in: SubmitRsvpRequest,
    session: AuthSession = Depends(require_guest_session),
    db: Session = Depends(get_db)
):
    """Submit or replace the current guest's RSVP"""
    guest = RsvpService.guest_for_session(db, session)
    rsvp = RsvpService.submit(db, guest, rsvp_in.attendees)
    return success_response(
        message="RSVP saved",
        data=rsvp
    )
