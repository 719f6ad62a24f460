"""
Seed admins and guests from the command line.

Usage:
    python seed.py admin <username> [--code CODE]
    python seed.py guest <name> <party_size> [--code CODE]
"""

import argparse
import logging
import secrets
import sys
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from app.core.db import Base, SessionLocal, commit_or_rollback, engine
from app.core.errors import AppError
from app.models import Admin, Guest
from app.services.invite_code_service import InviteCodeService
from app.services.password_service import PasswordService
from app.services.repositories import AdminRepo, GuestRepo, InviteCodeRepo

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = "abcdefghijkmnpqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ23456789"
PASSWORD_LENGTH = 16

def generate_password() -> str:
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(PASSWORD_LENGTH))

def seed_admin(db: Session, username: str, code: Optional[str] = None) -> Tuple[Admin, str, str]:
    """Create the admin or reset its password, and make sure an admin code exists.

    Returns the admin, the new plaintext password and the admin code.
    """
    password = generate_password()
    admin = AdminRepo.get_by_username(db, username)
    if admin is None:
        admin = Admin(username=username, password_hash=PasswordService.hash_password(password))
        db.add(admin)
    else:
        admin.password_hash = PasswordService.hash_password(password)

    if code is None or not InviteCodeRepo.exists(db, code):
        code = InviteCodeService.add_admin_code(db, code).code

    commit_or_rollback(db, "seed admin")
    db.refresh(admin)
    return admin, password, code

def seed_guest(db: Session, name: str, party_size: int, code: Optional[str] = None) -> Tuple[Guest, str]:
    """Create a guest with a guest invite code; returns the guest and its code"""
    guest = GuestRepo.add(db, name, party_size)
    invite = InviteCodeService.add_guest_code(db, guest, code)
    commit_or_rollback(db, "seed guest")
    db.refresh(guest)
    return guest, invite.code

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed admins and guests")
    subparsers = parser.add_subparsers(dest="command", required=True)

    admin_parser = subparsers.add_parser("admin", help="Create or reset an admin")
    admin_parser.add_argument("username")
    admin_parser.add_argument("--code", help="Admin invite code (generated when omitted)")

    guest_parser = subparsers.add_parser("guest", help="Create a guest")
    guest_parser.add_argument("name")
    guest_parser.add_argument("party_size", type=int)
    guest_parser.add_argument("--code", help="Guest invite code (generated when omitted)")

    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if args.command == "guest" and args.party_size < 1:
        print("party_size must be at least 1", file=sys.stderr)
        return 1

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if args.command == "admin":
            admin, password, code = seed_admin(db, args.username, args.code)
            print("Admin created:")
            print(f"  Username: {admin.username}")
            print(f"  Password: {password}")
            print(f"  Code:     {code}")
        else:
            guest, code = seed_guest(db, args.name, args.party_size, args.code)
            print("Guest created:")
            print(f"  Name:       {guest.name}")
            print(f"  Party size: {guest.party_size}")
            print(f"  Code:       {code}")
    except AppError as exc:
        logger.error(f"Seeding failed: {exc.message}")
        return 1
    finally:
        db.close()

    return 0

if __name__ == "__main__":
    sys.exit(main())
