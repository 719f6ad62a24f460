"""
Tests for guest administration, events, dashboard, exports and seeding
"""

import io

import pandas as pd
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.db import Base
from app.core.errors import BadRequestError, NotFoundError
from app.models import Admin, AuthSession, CodeType, InviteCode, SessionType
from app.schemas.event import EventCreate
from app.schemas.guest import GuestCreate, GuestUpdate
from app.schemas.rsvp import AttendeeInput
from app.services.dashboard_service import DashboardService
from app.services.event_service import EventService
from app.services.excel_service import ExcelService
from app.services.guest_service import GuestService
from app.services.invite_code_service import InviteCodeService
from app.services.password_service import PasswordService
from app.services.qr_service import QRService
from app.services.repositories import GuestRepo
from app.services.rsvp_service import RsvpService
from app.services.session_service import SessionService
from seed import generate_password, seed_admin, seed_guest

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_admin.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)

def event_input(**overrides):
    data = {
        "name": "Ceremony",
        "event_type": "ceremony",
        "event_date": "2025-06-14",
        "event_time": "15:30",
        "location_name": "Rose Garden",
        "location_address": "1 Garden Lane",
        "description": "Outdoor ceremony",
        "display_order": 1,
    }
    data.update(overrides)
    return EventCreate(**data)

def respond(db, guest_id, *attending_flags):
    guest = GuestRepo.get_by_id(db, guest_id)
    attendees = [
        AttendeeInput(name=f"Attendee {i}", is_attending=flag, is_primary=(i == 0))
        for i, flag in enumerate(attending_flags)
    ]
    return RsvpService.submit(db, guest, attendees)

class TestGuestService:
    """Test guest CRUD"""

    def test_create_guest_with_code(self, db_session):
        """New guests come with a resolvable invite code"""
        created = GuestService.create_guest(db_session, GuestCreate(name="Jane Smith", party_size=2))

        assert created.name == "Jane Smith"
        assert InviteCodeService.resolve(db_session, created.invite_code) == (CodeType.GUEST, created.id)

    def test_list_guests_newest_first(self, db_session):
        """Guest list is newest first with RSVP summaries"""
        first = GuestService.create_guest(db_session, GuestCreate(name="First", party_size=1))
        second = GuestService.create_guest(db_session, GuestCreate(name="Second", party_size=2))
        respond(db_session, first.id, True)

        listing = GuestService.list_guests(db_session)

        assert listing.total == 2
        assert [g.id for g in listing.guests] == [second.id, first.id]
        assert listing.guests[1].rsvp.has_responded
        assert listing.guests[1].rsvp.attending_count == 1
        assert not listing.guests[0].rsvp.has_responded

    def test_update_guest(self, db_session):
        """Name and party size can be changed"""
        created = GuestService.create_guest(db_session, GuestCreate(name="Old", party_size=1))
        updated = GuestService.update_guest(db_session, created.id, GuestUpdate(name="New", party_size=4))

        assert updated.name == "New"
        assert updated.party_size == 4
        assert updated.invite_code == created.invite_code

    def test_update_missing_guest(self, db_session):
        """Updating an unknown guest is not found"""
        with pytest.raises(NotFoundError):
            GuestService.update_guest(db_session, 999, GuestUpdate(name="X", party_size=1))

    def test_delete_guest_cascades(self, db_session):
        """Deleting a guest removes codes, sessions and RSVP"""
        created = GuestService.create_guest(db_session, GuestCreate(name="Gone", party_size=2))
        session = SessionService.create(db_session, SessionType.GUEST, guest_id=created.id)
        token = session.token
        respond(db_session, created.id, True, False)

        GuestService.delete_guest(db_session, created.id)

        assert GuestRepo.get_by_id(db_session, created.id) is None
        assert SessionService.resolve(db_session, token) is None
        assert db_session.query(InviteCode).count() == 0
        with pytest.raises(NotFoundError):
            InviteCodeService.resolve(db_session, created.invite_code)

    def test_regenerate_code(self, db_session):
        """Regenerating swaps the guest's code"""
        created = GuestService.create_guest(db_session, GuestCreate(name="Jane", party_size=1))
        new_code = GuestService.regenerate_code(db_session, created.id)

        assert new_code != created.invite_code
        assert GuestService.invite_code_for(db_session, created.id) == new_code

class TestEventService:
    """Test event schedule management"""

    def test_create_and_list(self, db_session):
        """Events are listed by display order"""
        EventService.create_event(db_session, event_input(name="Reception", event_type="reception", display_order=2))
        EventService.create_event(db_session, event_input(name="Ceremony", display_order=1))

        events = EventService.list_events(db_session)
        assert [e.name for e in events] == ["Ceremony", "Reception"]
        assert events[0].event_date == "2025-06-14"
        assert events[0].event_time == "15:30"

    def test_invalid_date_and_time(self, db_session):
        """Badly formatted dates and times are rejected"""
        with pytest.raises(BadRequestError) as exc_info:
            EventService.create_event(db_session, event_input(event_date="14/06/2025"))
        assert exc_info.value.message == "Invalid date format. Use YYYY-MM-DD"

        with pytest.raises(BadRequestError) as exc_info:
            EventService.create_event(db_session, event_input(event_time="3pm"))
        assert exc_info.value.message == "Invalid time format. Use HH:MM"

    def test_update_and_delete(self, db_session):
        """Events can be edited and removed"""
        event = EventService.create_event(db_session, event_input())
        updated = EventService.update_event(db_session, event.id, event_input(name="Vows", display_order=5))

        assert updated.name == "Vows"
        assert updated.display_order == 5

        EventService.delete_event(db_session, event.id)
        assert EventService.list_admin_events(db_session) == []

        with pytest.raises(NotFoundError):
            EventService.delete_event(db_session, event.id)

class TestDashboard:
    """Test aggregate statistics"""

    def test_stats(self, db_session):
        """Counts cover guests, responses and attendance"""
        a = GuestService.create_guest(db_session, GuestCreate(name="A", party_size=2))
        b = GuestService.create_guest(db_session, GuestCreate(name="B", party_size=3))
        GuestService.create_guest(db_session, GuestCreate(name="C", party_size=1))
        respond(db_session, a.id, True, False)
        respond(db_session, b.id, True, True, True)

        stats = DashboardService.get_stats(db_session)

        assert stats.total_guests == 3
        assert stats.total_expected_attendees == 6
        assert stats.rsvp_count == 2
        assert stats.pending_rsvps == 1
        assert stats.attending_count == 4
        assert stats.not_attending_count == 1
        assert {r.guest_name for r in stats.recent_rsvps} == {"A", "B"}

    def test_empty_stats(self, db_session):
        """An empty database gives zeros"""
        stats = DashboardService.get_stats(db_session)

        assert stats.total_guests == 0
        assert stats.total_expected_attendees == 0
        assert stats.attending_count == 0
        assert stats.recent_rsvps == []

class TestExportsAndQR:
    """Test Excel export and QR images"""

    def test_export_rsvps(self, db_session):
        """Export has one row per attendee and one for each silent guest"""
        a = GuestService.create_guest(db_session, GuestCreate(name="A", party_size=2))
        GuestService.create_guest(db_session, GuestCreate(name="B", party_size=1))
        respond(db_session, a.id, True, False)

        content = ExcelService.export_rsvps(db_session)
        df = pd.read_excel(io.BytesIO(content), sheet_name="RSVPs")

        assert list(df.columns) == ExcelService.EXPORT_COLUMNS
        assert len(df) == 3
        assert (df["Guest"] == "B").sum() == 1
        assert df.loc[df["Guest"] == "B", "Attending"].iloc[0] == "No response"

    def test_invite_url(self):
        """Invite links carry the code as a query parameter"""
        assert QRService.get_invite_url("ABC234") == f"{settings.BASE_URL.rstrip('/')}/?code=ABC234"

    def test_qr_png(self):
        """QR codes are PNG images"""
        png = QRService.generate_invite_qr("ABC234")
        assert png.startswith(b"\x89PNG")

class TestSeed:
    """Test seeding helpers"""

    def test_generate_password(self):
        """Generated passwords are 16 characters"""
        assert len(generate_password()) == 16

    def test_seed_admin_creates_and_resets(self, db_session):
        """Seeding an existing admin resets the password"""
        admin, password, code = seed_admin(db_session, "couple", "ADMINX")
        assert PasswordService.verify_password(password, admin.password_hash)
        assert InviteCodeService.resolve(db_session, code) == (CodeType.ADMIN, None)

        admin_again, new_password, code_again = seed_admin(db_session, "couple", "ADMINX")
        assert admin_again.id == admin.id
        assert code_again == "ADMINX"
        assert PasswordService.verify_password(new_password, admin_again.password_hash)
        assert db_session.query(Admin).count() == 1

    def test_seed_guest(self, db_session):
        """Seeded guests get the requested code"""
        guest, code = seed_guest(db_session, "Jane", 2, "JANE22")

        assert code == "JANE22"
        assert InviteCodeService.resolve(db_session, code) == (CodeType.GUEST, guest.id)
        assert db_session.query(AuthSession).count() == 0
