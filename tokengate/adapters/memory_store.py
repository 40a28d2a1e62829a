"""
Memory Credential Store - In-memory credential storage (testing only).
"""

import threading
from typing import Optional, Dict
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.domain.credential import Credential
from tokengate.errors import DuplicateCredentialError


class MemoryCredentialStore(CredentialStorePort):
    """
    In-memory credential storage.

    WARNING: Only for testing. Credentials are lost on restart.
    Not suitable for production or multi-process deployments.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._credentials: Dict[str, Credential] = {}
        self._lock = threading.Lock()

    def find_by_identifier(self, identifier: str) -> Optional[Credential]:
        """Get a credential from memory."""
        with self._lock:
            return self._credentials.get(identifier)

    def insert(self, credential: Credential) -> None:
        """Insert a credential; the lock makes check-and-set atomic."""
        with self._lock:
            if credential.identifier in self._credentials:
                raise DuplicateCredentialError(credential.identifier)
            self._credentials[credential.identifier] = credential

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)
