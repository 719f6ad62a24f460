"""
Session store: create, resolve and delete bearer-token sessions
"""

import logging
import secrets
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import commit_or_rollback, utcnow
from app.core.errors import InternalError
from app.models import AuthSession, SessionType
from app.services.repositories import SessionRepo

logger = logging.getLogger(__name__)

class SessionService:
    """Service for session lifecycle"""

    @staticmethod
    def generate_token() -> str:
        """32 random bytes, hex-encoded"""
        return secrets.token_hex(32)

    @staticmethod
    def check_binding(
        session_type: SessionType,
        guest_id: Optional[int],
        admin_id: Optional[int]
    ) -> None:
        """Exactly the identity matching the session type may be bound"""
        if session_type is SessionType.GUEST:
            valid = guest_id is not None and admin_id is None
        elif session_type is SessionType.ADMIN:
            valid = admin_id is not None and guest_id is None
        else:
            valid = guest_id is None and admin_id is None

        if not valid:
            raise InternalError(
                f"Inconsistent {session_type.value} session binding "
                f"(guest_id={guest_id}, admin_id={admin_id})"
            )

    @staticmethod
    def create(
        db: Session,
        session_type: SessionType,
        guest_id: Optional[int] = None,
        admin_id: Optional[int] = None,
        commit: bool = True
    ) -> AuthSession:
        """Issue a new session expiring a fixed number of days from now"""
        SessionService.check_binding(session_type, guest_id, admin_id)

        now = utcnow()
        session = AuthSession(
            token=SessionService.generate_token(),
            session_type=session_type.value,
            guest_id=guest_id,
            admin_id=admin_id,
            expires_at=now + timedelta(days=settings.SESSION_DURATION_DAYS),
            created_at=now,
        )
        db.add(session)
        if commit:
            commit_or_rollback(db, "create session")
            db.refresh(session)
        else:
            db.flush()

        logger.info(f"Created {session_type.value} session {session.id}")
        return session

    @staticmethod
    def resolve(db: Session, token: Optional[str]) -> Optional[AuthSession]:
        """Live session for the token; expired and unknown tokens both give None"""
        if not token:
            return None
        return SessionRepo.get_live_by_token(db, token, utcnow())

    @staticmethod
    def delete(db: Session, session: AuthSession) -> None:
        session_id = session.id
        db.delete(session)
        commit_or_rollback(db, "delete session")
        logger.info(f"Deleted session {session_id}")
