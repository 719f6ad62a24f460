"""
Admin API routes - require an admin session
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.models import AuthSession
from app.schemas.admin import ChangePasswordRequest
from app.schemas.event import AdminEventsListResponse, EventCreate, EventUpdate
from app.schemas.guest import GenerateCodeResponse, GuestCreate, GuestUpdate
from app.services.auth_service import AuthService
from app.services.dashboard_service import DashboardService
from app.services.event_service import EventService
from app.services.excel_service import ExcelService
from app.services.guest_service import GuestService
from app.services.qr_service import QRService
from app.utils.responses import success_response
from app.utils.security import require_admin_session

router = APIRouter()

# -------- Guests --------

@router.get("/guests")
def list_guests(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """List all guests with their invite codes and RSVP status"""
    return success_response(
        message="Guests retrieved successfully",
        data=GuestService.list_guests(db)
    )

@router.post("/guests")
def create_guest(
    guest_in: GuestCreate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Create a guest with a fresh invite code"""
    return success_response(
        message="Guest created successfully",
        data=GuestService.create_guest(db, guest_in),
        status_code=201
    )

@router.put("/guests/{guest_id}")
def update_guest(
    guest_id: int,
    guest_update: GuestUpdate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Update guest name and party size"""
    return success_response(
        message="Guest updated successfully",
        data=GuestService.update_guest(db, guest_id, guest_update)
    )

@router.delete("/guests/{guest_id}")
def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Delete a guest along with their invite codes, sessions and RSVP"""
    GuestService.delete_guest(db, guest_id)
    return success_response(
        message="Guest deleted successfully",
        data={"deleted_guest_id": guest_id}
    )

@router.post("/guests/{guest_id}/code")
def regenerate_code(
    guest_id: int,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Replace a guest's invite code"""
    return success_response(
        message="Invite code regenerated",
        data=GenerateCodeResponse(invite_code=GuestService.regenerate_code(db, guest_id))
    )

@router.get("/guests/{guest_id}/qr.png")
def get_guest_qr(
    guest_id: int,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """QR code image for a guest's invite link"""
    invite_code = GuestService.invite_code_for(db, guest_id)
    qr_bytes = QRService.generate_invite_qr(invite_code)

    return Response(
        content=qr_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f"inline; filename=invite_{invite_code}.png"}
    )

# -------- RSVPs --------

@router.get("/dashboard")
def get_dashboard_stats(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Aggregate RSVP statistics"""
    return success_response(
        message="Dashboard statistics retrieved",
        data=DashboardService.get_stats(db)
    )

@router.get("/rsvps/export.xlsx")
def export_rsvps(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Export all RSVP responses to Excel"""
    excel_content = ExcelService.export_rsvps(db)

    return Response(
        content=excel_content,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=rsvps.xlsx"}
    )

# -------- Events --------

@router.get("/events")
def list_admin_events(
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """List all events including display order"""
    return success_response(
        message="Events retrieved successfully",
        data=AdminEventsListResponse(events=EventService.list_admin_events(db))
    )

@router.post("/events")
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Create a new event"""
    return success_response(
        message="Event created successfully",
        data=EventService.create_event(db, event_in),
        status_code=201
    )

@router.put("/events/{event_id}")
def update_event(
    event_id: int,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Update an event"""
    return success_response(
        message="Event updated successfully",
        data=EventService.update_event(db, event_id, event_in)
    )

@router.delete("/events/{event_id}")
def delete_event(
    event_id: int,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Delete an event"""
    EventService.delete_event(db, event_id)
    return success_response(
        message="Event deleted successfully",
        data={"deleted_event_id": event_id}
    )

# -------- Settings --------

@router.post("/settings/password")
def change_password(
    password_in: ChangePasswordRequest,
    db: Session = Depends(get_db),
    session: AuthSession = Depends(require_admin_session)
):
    """Change the current admin's password"""
    AuthService.change_password(db, session, password_in.current_password, password_in.new_password)
    return success_response(message="Password changed successfully")
