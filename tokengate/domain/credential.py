"""
Credential Domain Model - Persisted account record.
"""

from dataclasses import dataclass, field
from typing import Dict, Any
from datetime import datetime, timezone
from enum import Enum


class Role(Enum):
    """Closed set of account roles."""
    ADMIN = "admin"
    GUEST = "guest"


@dataclass(frozen=True)
class Credential:
    """
    Credential entity - identifier, password hash and role.

    Domain rules:
    - identifier is unique (enforced atomically by the store)
    - password_hash is an opaque bcrypt digest, never the plaintext
    - immutable once created
    """
    identifier: str
    password_hash: str = field(repr=False)
    role: Role = Role.GUEST
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (store representation)."""
        return {
            "identifier": self.identifier,
            "password_hash": self.password_hash,
            "role": self.role.value,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Credential":
        """Deserialize from dict."""
        return cls(
            identifier=data["identifier"],
            password_hash=data["password_hash"],
            role=Role(data["role"]),
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.now(timezone.utc),
        )
