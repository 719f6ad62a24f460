"""
Tests for invite code generation and resolution
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.db import Base
from app.core.errors import InternalError, NotFoundError
from app.models import CodeType, Guest, InviteCode
from app.services.invite_code_service import INVITE_CODE_ALPHABET, InviteCodeService

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_invite_codes.db"
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

@pytest.fixture
def guest(db_session):
    guest = Guest(name="Jane Smith", party_size=2)
    db_session.add(guest)
    db_session.commit()
    return guest

class TestCodeGeneration:
    """Test random code sampling"""

    def test_alphabet_excludes_ambiguous_characters(self):
        """Codes never contain characters that are easy to misread"""
        for char in "0O1IL":
            assert char not in INVITE_CODE_ALPHABET
        assert len(set(INVITE_CODE_ALPHABET)) == len(INVITE_CODE_ALPHABET)

    def test_random_code_shape(self):
        """Codes have the configured length and use only the alphabet"""
        for _ in range(50):
            code = InviteCodeService.random_code()
            assert len(code) == settings.INVITE_CODE_LENGTH
            assert all(char in INVITE_CODE_ALPHABET for char in code)

    def test_generate_skips_codes_in_use(self, db_session, guest, monkeypatch):
        """A sampled code that already exists is discarded"""
        InviteCodeService.add_guest_code(db_session, guest, "AAAAAA")
        db_session.commit()

        samples = iter(["AAAAAA", "AAAAAA", "BBBBBB"])
        monkeypatch.setattr(InviteCodeService, "random_code", staticmethod(lambda length=None: next(samples)))

        assert InviteCodeService.generate_unique_code(db_session) == "BBBBBB"

    def test_generate_gives_up_after_max_attempts(self, db_session, guest, monkeypatch):
        """Persistent collisions end in an internal error instead of looping"""
        InviteCodeService.add_guest_code(db_session, guest, "AAAAAA")
        db_session.commit()

        calls = []

        def always_taken(length=None):
            calls.append(1)
            return "AAAAAA"

        monkeypatch.setattr(InviteCodeService, "random_code", staticmethod(always_taken))

        with pytest.raises(InternalError):
            InviteCodeService.generate_unique_code(db_session)
        assert len(calls) == settings.INVITE_CODE_MAX_ATTEMPTS

    def test_unique_constraint_rejects_duplicate_code(self, db_session, guest):
        """The store refuses a second row with the same code"""
        InviteCodeService.add_guest_code(db_session, guest, "CCCCCC")
        db_session.commit()

        with pytest.raises(IntegrityError):
            InviteCodeService.add_admin_code(db_session, "CCCCCC")
        db_session.rollback()

class TestCodeResolution:
    """Test looking up codes"""

    def test_resolve_guest_code(self, db_session, guest):
        """Guest codes resolve to their guest"""
        invite = InviteCodeService.add_guest_code(db_session, guest)
        db_session.commit()

        code_type, guest_id = InviteCodeService.resolve(db_session, invite.code)
        assert code_type is CodeType.GUEST
        assert guest_id == guest.id

    def test_resolve_admin_code(self, db_session):
        """Admin codes resolve with no guest"""
        invite = InviteCodeService.add_admin_code(db_session, "ADMIN1")
        db_session.commit()

        assert InviteCodeService.resolve(db_session, invite.code) == (CodeType.ADMIN, None)

    def test_resolve_unknown_code(self, db_session):
        """Unknown codes are not found"""
        with pytest.raises(NotFoundError):
            InviteCodeService.resolve(db_session, "NOPE42")

    def test_lookup_is_case_sensitive(self, db_session, guest):
        """Codes must match exactly"""
        InviteCodeService.add_guest_code(db_session, guest, "ABCDEF")
        db_session.commit()

        with pytest.raises(NotFoundError):
            InviteCodeService.resolve(db_session, "abcdef")

    def test_regenerate_replaces_old_code(self, db_session, guest):
        """After regeneration only the new code resolves"""
        old = InviteCodeService.add_guest_code(db_session, guest).code
        db_session.commit()

        new = InviteCodeService.regenerate_guest_code(db_session, guest).code

        assert new != old
        assert InviteCodeService.resolve(db_session, new) == (CodeType.GUEST, guest.id)
        with pytest.raises(NotFoundError):
            InviteCodeService.resolve(db_session, old)

    def test_deleting_guest_removes_codes(self, db_session, guest):
        """Guest codes go away with their guest"""
        code = InviteCodeService.add_guest_code(db_session, guest).code
        db_session.commit()

        db_session.delete(guest)
        db_session.commit()

        assert db_session.query(InviteCode).filter(InviteCode.code == code).first() is None
