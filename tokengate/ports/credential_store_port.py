"""
Credential Store Port - Interface for persisted account credentials.

Implementations:
- MemoryCredentialStore: In-process dict (testing, single worker)
- RedisCredentialStore: Redis keys with SET NX
- DynamoDBCredentialStore: DynamoDB conditional puts
"""

from abc import ABC, abstractmethod
from typing import Optional
from tokengate.domain.credential import Credential


class CredentialStorePort(ABC):
    """Port: Look up and insert credentials."""

    @abstractmethod
    def find_by_identifier(self, identifier: str) -> Optional[Credential]:
        """
        Look up a credential.

        Args:
            identifier: Account identifier (exact, case-sensitive)

        Returns:
            Credential if found, None if not found

        Raises:
            CredentialStoreError: If the store cannot answer
        """
        pass

    @abstractmethod
    def insert(self, credential: Credential) -> None:
        """
        Insert a new credential.

        Uniqueness of the identifier must be enforced atomically here;
        callers' check-then-insert cannot rule out a concurrent insert.

        Args:
            credential: Credential to persist

        Raises:
            DuplicateCredentialError: If the identifier already exists
            CredentialStoreError: If the write fails
        """
        pass
