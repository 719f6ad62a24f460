"""
Admin dashboard statistics
"""

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.models import Guest, Rsvp, RsvpAttendee
from app.schemas.admin import DashboardStatsResponse, RecentRsvp
from app.services.repositories import RsvpRepo

RECENT_RSVP_LIMIT = 5

class DashboardService:
    """Service for RSVP aggregate figures"""

    @staticmethod
    def get_stats(db: Session) -> DashboardStatsResponse:
        total_guests, total_expected = db.query(
            func.count(Guest.id),
            func.coalesce(func.sum(Guest.party_size), 0)
        ).one()

        rsvp_count = db.query(func.count(Rsvp.id)).scalar() or 0
        attending_count, not_attending_count = RsvpRepo.attendance_counts(db)

        recent_rows = db.query(
            Guest.name,
            Rsvp.responded_at,
            func.coalesce(func.sum(case((RsvpAttendee.is_attending, 1), else_=0)), 0),
            func.coalesce(func.sum(case((~RsvpAttendee.is_attending, 1), else_=0)), 0),
        ).select_from(
            Rsvp
        ).join(
            Guest, Rsvp.guest_id == Guest.id
        ).outerjoin(
            RsvpAttendee, RsvpAttendee.rsvp_id == Rsvp.id
        ).group_by(
            Rsvp.id, Guest.name, Rsvp.responded_at
        ).order_by(
            Rsvp.responded_at.desc()
        ).limit(RECENT_RSVP_LIMIT).all()

        recent_rsvps = [
            RecentRsvp(
                guest_name=name,
                responded_at=responded_at,
                attending_count=int(attending),
                not_attending_count=int(not_attending),
            )
            for name, responded_at, attending, not_attending in recent_rows
        ]

        return DashboardStatsResponse(
            total_guests=total_guests,
            total_expected_attendees=int(total_expected),
            rsvp_count=rsvp_count,
            pending_rsvps=total_guests - rsvp_count,
            attending_count=attending_count,
            not_attending_count=not_attending_count,
            recent_rsvps=recent_rsvps,
        )
