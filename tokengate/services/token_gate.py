"""
Protected-request gate - turns an Authorization header into an identity.
"""

from datetime import datetime
from typing import Optional

from tokengate.domain.token import RequestIdentity
from tokengate.errors import InvalidTokenError, MissingAuthorizationError
from tokengate.ports.token_port import TokenPort

BEARER_SCHEME = "bearer"


class BearerTokenGate:
    """Verifies bearer tokens presented on protected requests."""

    def __init__(self, tokens: TokenPort):
        self._tokens = tokens

    def authorize(self, header_value: Optional[str], now: Optional[datetime] = None) -> RequestIdentity:
        """
        Verify an Authorization header value.

        Args:
            header_value: Raw header, expected as "Bearer <token>"
            now: Instant to check expiry against

        Returns:
            Identity (identifier, role) for request-scoped context

        Raises:
            MissingAuthorizationError: Header absent or empty
            InvalidTokenError: Wrong scheme, malformed, bad signature or expired
        """
        if not header_value or not header_value.strip():
            raise MissingAuthorizationError()

        scheme, _, token = header_value.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != BEARER_SCHEME or not token:
            raise InvalidTokenError()

        claims = self._tokens.verify(token, now=now)
        return RequestIdentity(identifier=claims.identifier, role=claims.role)
