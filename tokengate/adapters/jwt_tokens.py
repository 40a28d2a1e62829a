"""
JWT Token Adapter - Implements TokenPort with HMAC-signed JWTs.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import jwt

from tokengate.domain.credential import Role
from tokengate.domain.token import Claims, SigningContext
from tokengate.errors import InvalidTokenError, SigningError
from tokengate.ports.token_port import TokenPort

logger = logging.getLogger(__name__)


class JWTTokenAdapter(TokenPort):
    """
    JWT-based session tokens.

    Uses PyJWT for token creation and verification. The signing context is
    injected and never replaced, so every token stays verifiable until its
    own expiry.
    """

    def __init__(self, signing: SigningContext, leeway: int = 0):
        """
        Initialize JWT adapter.

        Args:
            signing: Process-wide signing context (key, algorithm, issuer)
            leeway: Clock skew tolerance in seconds for expiry checks
        """
        self._signing = signing
        self._leeway = leeway

    def issue(self, claims: Claims) -> str:
        """
        Create a JWT for the given claims.

        Args:
            claims: Identity, role and validity window

        Returns:
            Compact header.payload.signature string
        """
        payload = {
            "sub": claims.identifier,
            "role": claims.role.value,
            "iat": claims.issued_at,
            "exp": claims.expires_at,
            "iss": self._signing.issuer,
        }

        try:
            return jwt.encode(payload, self._signing.key, algorithm=self._signing.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError(str(e)) from e

    def verify(self, token: str, now: Optional[datetime] = None) -> Claims:
        """
        Verify a JWT and return its claims.

        Every failure (bad format, bad signature, wrong issuer, expired,
        unknown role) raises the same InvalidTokenError.
        """
        if not token:
            raise InvalidTokenError()

        # An explicit instant is checked here; otherwise PyJWT checks exp/iat
        check_time = now is None
        try:
            payload = jwt.decode(
                token,
                self._signing.key,
                algorithms=[self._signing.algorithm],
                issuer=self._signing.issuer,
                leeway=self._leeway,
                options={
                    "require": ["sub", "exp", "iat", "iss"],
                    "verify_exp": check_time,
                    "verify_iat": check_time,
                },
            )
            claims = Claims(
                identifier=payload["sub"],
                role=Role(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenError()
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected token: %s", e)
            raise InvalidTokenError()
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            logger.debug("Rejected token with unusable claims: %s", e)
            raise InvalidTokenError()

        if not check_time and claims.is_expired(now, leeway=self._leeway):
            logger.debug("Rejected expired token")
            raise InvalidTokenError()

        return claims
