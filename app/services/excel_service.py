"""
Excel export of RSVP responses
"""

import io
from typing import Any, Dict, List

import pandas as pd
from sqlalchemy.orm import Session

from app.services.repositories import GuestRepo, InviteCodeRepo, RsvpRepo

class ExcelService:
    """Service for handling Excel operations"""

    EXPORT_COLUMNS = [
        'Guest', 'Invite Code', 'Attendee', 'Attending', 'Meal',
        'Dietary Restrictions', 'Primary', 'Responded At'
    ]

    @staticmethod
    def collect_rows(db: Session) -> List[Dict[str, Any]]:
        """One row per attendee; guests without an answer get a single row"""
        rows = []
        for guest in GuestRepo.list_newest_first(db):
            invite = InviteCodeRepo.guest_code(db, guest.id)
            code = invite.code if invite else ''
            rsvp = RsvpRepo.get_for_guest(db, guest.id)

            if rsvp is None:
                rows.append({
                    'Guest': guest.name,
                    'Invite Code': code,
                    'Attendee': '',
                    'Attending': 'No response',
                    'Meal': '',
                    'Dietary Restrictions': '',
                    'Primary': '',
                    'Responded At': '',
                })
                continue

            for attendee in RsvpRepo.list_attendees(db, rsvp.id):
                rows.append({
                    'Guest': guest.name,
                    'Invite Code': code,
                    'Attendee': attendee.name,
                    'Attending': 'Yes' if attendee.is_attending else 'No',
                    'Meal': attendee.meal_preference or '',
                    'Dietary Restrictions': attendee.dietary_restrictions or '',
                    'Primary': 'Yes' if attendee.is_primary else 'No',
                    'Responded At': rsvp.responded_at.strftime('%Y-%m-%d %H:%M'),
                })
        return rows

    @staticmethod
    def export_rsvps(db: Session) -> bytes:
        """Export every guest's RSVP to an Excel workbook"""
        df = pd.DataFrame(ExcelService.collect_rows(db), columns=ExcelService.EXPORT_COLUMNS)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name='RSVPs')

        return buffer.getvalue()
