"""
Admin password hashing and verification (Argon2id)
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

_hasher = PasswordHasher()

class PasswordService:
    """Hashes and verifies admin passwords"""

    @staticmethod
    def hash_password(password: str) -> str:
        """Self-describing Argon2 hash with a fresh random salt"""
        return _hasher.hash(password)

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        """True only if the password matches; malformed hashes never raise"""
        if not password_hash:
            return False
        try:
            return _hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
