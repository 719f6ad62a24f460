"""
Authentication state machine.

    Unauthenticated --redeem(guest code)--> GuestSession
    Unauthenticated --redeem(admin code)--> AdminPendingSession
    AdminPendingSession --login--> AdminSession

Any state --logout--> Unauthenticated. Guest and admin sessions are terminal;
a session changes type at most once, by being replaced on login.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.core.db import commit_or_rollback
from app.core.errors import BadRequestError, InternalError, NotFoundError, UnauthorizedError
from app.models import Admin, AuthSession, CodeType, SessionType
from app.schemas.auth import SessionResponse
from app.services.invite_code_service import InviteCodeService
from app.services.password_service import PasswordService
from app.services.repositories import AdminRepo, GuestRepo
from app.services.session_service import SessionService

logger = logging.getLogger(__name__)

class AuthService:
    """Service for invite-code redemption, admin login and session guards"""

    @staticmethod
    def require(session: Optional[AuthSession], expected: SessionType) -> AuthSession:
        """Guard for protected operations: a live session of exactly the expected type"""
        if session is None:
            raise UnauthorizedError()
        if session.kind is not expected:
            raise UnauthorizedError()
        return session

    @staticmethod
    def redeem(db: Session, code: str) -> Tuple[AuthSession, Optional[str]]:
        """Exchange an invite code for a new session.

        Returns the session and, for guest codes, the guest's display name.
        """
        try:
            code_type, guest_id = InviteCodeService.resolve(db, code)
        except NotFoundError:
            logger.info("Rejected unknown invite code")
            raise BadRequestError("Invalid code")

        if code_type is CodeType.GUEST:
            if guest_id is None:
                raise InternalError("Guest code missing guest_id")
            guest = GuestRepo.get_by_id(db, guest_id)
            if not guest:
                raise InternalError(f"Guest {guest_id} not found for invite code")

            session = SessionService.create(db, SessionType.GUEST, guest_id=guest.id)
            return session, guest.name

        session = SessionService.create(db, SessionType.ADMIN_PENDING)
        return session, None

    @staticmethod
    def login(
        db: Session,
        current: Optional[AuthSession],
        username: str,
        password: str
    ) -> Tuple[AuthSession, Admin]:
        """Upgrade an admin-pending session to an admin session.

        On failure the pending session is left in place so the caller can retry.
        Unknown usernames and wrong passwords fail identically.
        """
        pending = AuthService.require(current, SessionType.ADMIN_PENDING)

        admin = AdminRepo.get_by_username(db, username)
        if admin is None or not PasswordService.verify_password(password, admin.password_hash):
            logger.warning(f"Failed admin login attempt from pending session {pending.id}")
            raise UnauthorizedError()

        db.delete(pending)
        session = SessionService.create(db, SessionType.ADMIN, admin_id=admin.id, commit=False)
        commit_or_rollback(db, "upgrade admin session")
        db.refresh(session)

        logger.info(f"Admin {admin.id} logged in")
        return session, admin

    @staticmethod
    def logout(db: Session, token: Optional[str]) -> None:
        """Delete the caller's session if one resolves; no-op otherwise"""
        session = SessionService.resolve(db, token)
        if session is not None:
            SessionService.delete(db, session)

    @staticmethod
    def describe(db: Session, session: Optional[AuthSession]) -> SessionResponse:
        """Session type and bound identity for the current caller"""
        if session is None:
            raise UnauthorizedError()

        session_type = session.kind
        response = SessionResponse(session_type=session_type.value)

        if session_type is SessionType.GUEST:
            guest = GuestRepo.get_by_id(db, session.guest_id) if session.guest_id else None
            response.guest_id = session.guest_id
            response.guest_name = guest.name if guest else None
        elif session_type is SessionType.ADMIN:
            admin = AdminRepo.get_by_id(db, session.admin_id) if session.admin_id else None
            response.admin_id = session.admin_id
            response.admin_username = admin.username if admin else None

        return response

    @staticmethod
    def current_admin(db: Session, session: AuthSession) -> Admin:
        session = AuthService.require(session, SessionType.ADMIN)
        admin = AdminRepo.get_by_id(db, session.admin_id) if session.admin_id else None
        if admin is None:
            raise UnauthorizedError()
        return admin

    @staticmethod
    def change_password(
        db: Session,
        session: AuthSession,
        current_password: str,
        new_password: str
    ) -> None:
        """Overwrite the admin's hash after proving knowledge of the current password"""
        admin = AuthService.current_admin(db, session)

        if not PasswordService.verify_password(current_password, admin.password_hash):
            raise BadRequestError("Current password is incorrect")

        admin.password_hash = PasswordService.hash_password(new_password)
        commit_or_rollback(db, "change password")
        logger.info(f"Admin {admin.id} changed password")
