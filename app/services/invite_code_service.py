"""
Invite code registry: generation and resolution of invite codes
"""

import logging
import secrets
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import commit_or_rollback
from app.core.errors import InternalError, NotFoundError
from app.models import CodeType, Guest, InviteCode
from app.services.repositories import InviteCodeRepo

logger = logging.getLogger(__name__)

# No 0/O, 1/I or L: codes are read off paper and typed by hand
INVITE_CODE_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"

class InviteCodeService:
    """Service for invite code operations"""

    @staticmethod
    def random_code(length: Optional[int] = None) -> str:
        length = length or settings.INVITE_CODE_LENGTH
        return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))

    @staticmethod
    def generate_unique_code(db: Session) -> str:
        """Sample codes until one is unused.

        The caller must insert the returned code in the same transaction as
        this check; the unique constraint on ``invite_codes.code`` rejects the
        insert if a concurrent transaction won the race.
        """
        for attempt in range(1, settings.INVITE_CODE_MAX_ATTEMPTS + 1):
            code = InviteCodeService.random_code()
            if not InviteCodeRepo.exists(db, code):
                return code
            logger.warning(f"Invite code collision on attempt {attempt}")

        raise InternalError(
            f"Could not generate a unique invite code after {settings.INVITE_CODE_MAX_ATTEMPTS} attempts"
        )

    @staticmethod
    def add_guest_code(db: Session, guest: Guest, code: Optional[str] = None) -> InviteCode:
        """Stage a guest-type code for the guest (not committed)"""
        invite = InviteCode(
            code=code or InviteCodeService.generate_unique_code(db),
            code_type=CodeType.GUEST.value,
            guest_id=guest.id,
        )
        db.add(invite)
        db.flush()
        return invite

    @staticmethod
    def add_admin_code(db: Session, code: Optional[str] = None) -> InviteCode:
        """Stage a shared admin-login code (not committed)"""
        invite = InviteCode(
            code=code or InviteCodeService.generate_unique_code(db),
            code_type=CodeType.ADMIN.value,
            guest_id=None,
        )
        db.add(invite)
        db.flush()
        return invite

    @staticmethod
    def regenerate_guest_code(db: Session, guest: Guest) -> InviteCode:
        """Replace the guest's code with a fresh one in a single transaction"""
        removed = InviteCodeRepo.delete_guest_codes(db, guest.id)
        invite = InviteCodeService.add_guest_code(db, guest)
        commit_or_rollback(db, "regenerate invite code")
        logger.info(f"Regenerated invite code for guest {guest.id} ({removed} old code(s) removed)")
        return invite

    @staticmethod
    def resolve(db: Session, code: str) -> Tuple[CodeType, Optional[int]]:
        """Type and bound guest id of a code.

        Raises NotFoundError for unknown codes and InternalError when the
        stored type is not a known value.
        """
        invite = InviteCodeRepo.get_by_code(db, code)
        if not invite:
            raise NotFoundError("Invite code not found")

        try:
            code_type = invite.kind
        except InternalError:
            logger.error(f"Invite code {invite.id} has unknown code_type {invite.code_type!r}")
            raise

        return code_type, invite.guest_id
