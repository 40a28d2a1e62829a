"""
Redis Credential Store - Redis-backed credential storage.
"""

import json
from typing import Optional
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.domain.credential import Credential
from tokengate.errors import CredentialStoreError, DuplicateCredentialError


class RedisCredentialStore(CredentialStorePort):
    """
    Redis-backed credential storage.

    Each credential is one JSON string key. Inserts use SET NX, so Redis
    is the linearization point for identifier uniqueness.
    """

    def __init__(
        self,
        redis_client=None,
        url: str = "redis://localhost:6379/0",
        prefix: str = "tokengate:credential:",
        timeout: float = 5.0,
    ):
        """
        Initialize Redis credential store.

        Args:
            redis_client: Redis client instance (created from url if omitted)
            url: Redis URL used when no client is given
            prefix: Key prefix for credentials
            timeout: Socket connect/read timeout in seconds
        """
        try:
            import redis
        except ImportError:
            raise ImportError("redis package required: pip install redis")

        self._redis_error = redis.RedisError
        self._redis = redis_client
        self._url = url
        self._prefix = prefix
        self._timeout = timeout

    def _get_redis(self):
        """Lazy load Redis client."""
        if self._redis is None:
            import redis
            self._redis = redis.Redis.from_url(
                self._url,
                decode_responses=True,
                socket_timeout=self._timeout,
                socket_connect_timeout=self._timeout,
            )
        return self._redis

    def _key(self, identifier: str) -> str:
        """Generate Redis key for a credential."""
        return f"{self._prefix}{identifier}"

    def find_by_identifier(self, identifier: str) -> Optional[Credential]:
        """
        Get a credential from Redis.

        Args:
            identifier: Account identifier

        Returns:
            Credential if found, None otherwise
        """
        try:
            data = self._get_redis().get(self._key(identifier))
        except self._redis_error as e:
            raise CredentialStoreError(f"redis lookup failed: {e}") from e

        if data is None:
            return None

        try:
            return Credential.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError) as e:
            raise CredentialStoreError(f"corrupt credential record for {identifier!r}") from e

    def insert(self, credential: Credential) -> None:
        """
        Insert a credential into Redis.

        Args:
            credential: Credential to persist
        """
        try:
            created = self._get_redis().set(
                self._key(credential.identifier),
                json.dumps(credential.to_dict()),
                nx=True,
            )
        except self._redis_error as e:
            raise CredentialStoreError(f"redis insert failed: {e}") from e

        if not created:
            raise DuplicateCredentialError(credential.identifier)
