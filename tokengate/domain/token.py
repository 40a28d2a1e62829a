"""
Token Domain Models - Claims, signing context and request identity.
"""

import secrets
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union
from datetime import datetime, timedelta, timezone

from tokengate.domain.credential import Credential, Role

MIN_KEY_BYTES = 32


def as_utc(moment: Optional[datetime] = None) -> datetime:
    """Current UTC time, or ``moment`` with naive values read as UTC."""
    if moment is None:
        return datetime.now(timezone.utc)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class Claims:
    """
    Identity and role payload carried by a session token.

    The validity window is fixed at creation and never extended.
    """
    identifier: str
    role: Role
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def for_credential(
        cls,
        credential: Credential,
        ttl: int = 300,
        now: Optional[datetime] = None,
    ) -> "Claims":
        """
        Build claims for a freshly authenticated credential.

        Args:
            credential: Authenticated credential
            ttl: Validity window in seconds (default 5 minutes)
            now: Issuance instant (defaults to current UTC time; naive is UTC)

        Returns:
            New claims instance
        """
        # JWT timestamps are whole seconds
        issued_at = as_utc(now).replace(microsecond=0)
        return cls(
            identifier=credential.identifier,
            role=credential.role,
            issued_at=issued_at,
            expires_at=issued_at + timedelta(seconds=ttl),
        )

    def is_expired(self, now: Optional[datetime] = None, leeway: int = 0) -> bool:
        return as_utc(now) >= self.expires_at + timedelta(seconds=leeway)


@dataclass(frozen=True)
class SigningContext:
    """
    Symmetric signing key plus the parameters bound to it.

    Created once per process and shared read-only between requests.
    Tokens stay verifiable until expiry because the key never changes.
    """
    key: bytes = field(repr=False)
    algorithm: str = "HS256"
    issuer: str = "tokengate"

    def __post_init__(self):
        if len(self.key) < MIN_KEY_BYTES:
            raise ValueError(f"Signing key must be at least {MIN_KEY_BYTES} bytes")

    @classmethod
    def generate(cls, length: int = MIN_KEY_BYTES, **kwargs) -> "SigningContext":
        """Create a context with a random key (process lifetime only)."""
        return cls(key=secrets.token_bytes(length), **kwargs)

    @classmethod
    def from_secret(cls, secret: Union[str, bytes], **kwargs) -> "SigningContext":
        """Create a context from configured or stored secret material."""
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        return cls(key=secret, **kwargs)


@dataclass(frozen=True)
class RequestIdentity:
    """Identity attached to a protected request after token verification."""
    identifier: str
    role: Role

    def to_dict(self) -> Dict[str, Any]:
        return {"email": self.identifier, "role": self.role.value}


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""
    token: str
    expires_at: datetime
    redirect: str = "dashboard"

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "redirect": self.redirect}
