"""
HashiCorp Vault Secret Source - Production-grade secret loading.
"""

import logging
from typing import Optional
from tokengate.ports.secret_source_port import SecretSourcePort
from tokengate.errors import SecretSourceError

logger = logging.getLogger(__name__)


class VaultSecretSource(SecretSourcePort):
    """
    HashiCorp Vault secret source.

    Reads the "value" field of KV Secrets Engine v2 entries.
    Requires: pip install hvac
    """

    def __init__(
        self,
        url: str = "http://localhost:8200",
        token: Optional[str] = None,
        mount_point: str = "secret",
        path_prefix: str = "tokengate",
        client=None,
    ):
        """
        Initialize Vault source.

        Args:
            url: Vault server URL
            token: Vault token (or use VAULT_TOKEN env var)
            mount_point: KV mount point (default: secret)
            path_prefix: Path prefix for secrets (default: tokengate)
            client: Pre-built hvac.Client
        """
        try:
            import hvac
            from hvac.exceptions import InvalidPath, VaultError
        except ImportError:
            raise ImportError("hvac package required: pip install hvac")

        self._invalid_path = InvalidPath
        self._vault_error = VaultError
        self._mount_point = mount_point
        self._path_prefix = path_prefix

        self._client = client or hvac.Client(url=url, token=token)

        if not self._client.is_authenticated():
            raise SecretSourceError("Vault authentication failed")

    def _get_path(self, name: str) -> str:
        """Get full Vault path for a secret."""
        return f"{self._path_prefix}/{name}"

    def load(self, name: str) -> Optional[str]:
        """
        Load a secret from Vault.

        Args:
            name: Secret name

        Returns:
            Secret value or None if the path does not exist
        """
        path = self._get_path(name)

        try:
            response = self._client.secrets.kv.v2.read_secret_version(
                path=path,
                mount_point=self._mount_point,
                raise_on_deleted_version=True,
            )
        except self._invalid_path:
            logger.info("No Vault secret at %s/%s", self._mount_point, path)
            return None
        except self._vault_error as e:
            raise SecretSourceError(f"Vault read failed for {path}: {e}") from e

        return response["data"]["data"].get("value")
