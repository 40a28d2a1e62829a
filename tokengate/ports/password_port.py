"""
Password Hasher Port - Interface for one-way password hashing.

Implementations:
- BcryptPasswordHasher: SHA pre-digest + bcrypt
"""

from abc import ABC, abstractmethod


class PasswordHasherPort(ABC):
    """Port: Derive and check stored password hashes."""

    @abstractmethod
    def derive(self, password: str, cost: int) -> str:
        """
        Derive a salted hash suitable for storage.

        Args:
            password: Plaintext password
            cost: Work factor

        Returns:
            Encoded hash (salt embedded)

        Raises:
            HashingError: If the hashing backend fails
        """
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Returns:
            True on match. False on mismatch or malformed hash; never raises.
        """
        pass
