"""
Bcrypt Password Hasher - Implements PasswordHasherPort.
"""

import base64
import hashlib
import logging

import bcrypt

from tokengate.errors import HashingError
from tokengate.ports.password_port import PasswordHasherPort

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasherPort):
    """
    Pre-digest the password, then bcrypt the digest.

    bcrypt only reads 72 bytes and rejects NUL bytes, so the password is
    reduced to a base64 SHA-384 digest (64 ASCII bytes) first. Every
    password, whatever its length, reaches bcrypt as the same-sized input.
    Salt is generated per call and embedded in the output.
    """

    @staticmethod
    def _prehash(password: str) -> bytes:
        digest = hashlib.sha384(password.encode("utf-8")).digest()
        return base64.b64encode(digest)

    def derive(self, password: str, cost: int = 14) -> str:
        """
        Hash a password for storage.

        Args:
            password: Plaintext password
            cost: bcrypt rounds (4-31)

        Returns:
            bcrypt hash string ($2b$...)
        """
        try:
            salt = bcrypt.gensalt(rounds=cost)
            hashed = bcrypt.hashpw(self._prehash(password), salt)
        except OSError as e:
            logger.error("Password hashing failed: %s", e)
            raise HashingError("password hashing failed") from e
        return hashed.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a stored hash."""
        try:
            return bcrypt.checkpw(self._prehash(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False
