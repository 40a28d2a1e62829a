"""
Secret Source Port - Interface for loading durable secrets (signing key).

Implementations:
- EnvSecretSource: Environment variables (dev only)
- VaultSecretSource: HashiCorp Vault KV v2
- AWSSecretsSource: AWS Secrets Manager
"""

from abc import ABC, abstractmethod
from typing import Optional


class SecretSourcePort(ABC):
    """Port: Read-only secret retrieval."""

    @abstractmethod
    def load(self, name: str) -> Optional[str]:
        """
        Load a secret value.

        Args:
            name: Secret name (e.g. "signing_key")

        Returns:
            Secret value, or None if it does not exist

        Raises:
            SecretSourceError: If the backend fails
        """
        pass
