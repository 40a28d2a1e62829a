"""
Token Port - Interface for signed session tokens.

Implementations:
- JWTTokenAdapter: HMAC-signed JWT (PyJWT)
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from tokengate.domain.token import Claims


class TokenPort(ABC):
    """Port: Issue and verify stateless session tokens."""

    @abstractmethod
    def issue(self, claims: Claims) -> str:
        """
        Sign claims into a compact token string.

        Raises:
            SigningError: If signing fails
        """
        pass

    @abstractmethod
    def verify(self, token: str, now: Optional[datetime] = None) -> Claims:
        """
        Check signature and expiry and return the embedded claims.

        Args:
            token: Token string
            now: Instant to check expiry against (defaults to current time)

        Raises:
            InvalidTokenError: If malformed, wrongly signed or expired
        """
        pass
