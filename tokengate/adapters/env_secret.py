"""
Environment Variable Secret Source - Simple env-based secret loading.

WARNING: For development only.
Use Vault or AWS Secrets Manager in production.
"""

import os
from typing import Optional
from tokengate.ports.secret_source_port import SecretSourcePort


class EnvSecretSource(SecretSourcePort):
    """Reads secrets from environment variables."""

    def __init__(self, prefix: str = "TOKENGATE_SECRET_"):
        """
        Initialize env secret source.

        Args:
            prefix: Prefix for environment variables
        """
        self._prefix = prefix

    def _env_key(self, name: str) -> str:
        """Convert secret name to env var name."""
        return f"{self._prefix}{name.upper()}"

    def load(self, name: str) -> Optional[str]:
        return os.environ.get(self._env_key(name)) or None
