"""
Auth Client - High-level SDK wiring the signup, login and gate flows.

Simplifies building the service from adapters or from Settings.
"""

import logging
from datetime import datetime
from typing import Optional, Dict, Any

from tokengate.adapters.bcrypt_hasher import BcryptPasswordHasher
from tokengate.adapters.jwt_tokens import JWTTokenAdapter
from tokengate.adapters.memory_store import MemoryCredentialStore
from tokengate.config import Settings, get_settings
from tokengate.domain.credential import Credential
from tokengate.domain.requests import ValidationPolicy
from tokengate.domain.token import LoginResult, RequestIdentity, SigningContext
from tokengate.errors import SecretSourceError
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.ports.password_port import PasswordHasherPort
from tokengate.ports.secret_source_port import SecretSourcePort
from tokengate.ports.token_port import TokenPort
from tokengate.services.authentication import AuthenticationService
from tokengate.services.registration import RegistrationService
from tokengate.services.token_gate import BearerTokenGate

logger = logging.getLogger(__name__)


class AuthClient:
    """
    High-level client combining registration, authentication and the gate.

    Example:
        from tokengate import AuthClient, SigningContext
        from tokengate.adapters import JWTTokenAdapter, MemoryCredentialStore

        client = AuthClient(
            store=MemoryCredentialStore(),
            tokens=JWTTokenAdapter(SigningContext.generate()),
        )

        client.signup({"email": "user@test.io", "password": "longenough1",
                       "confirm_password": "longenough1", "role": "guest"})
        result = client.login({"email": "user@test.io", "password": "longenough1"})
        identity = client.authorize(f"Bearer {result.token}")
    """

    def __init__(
        self,
        store: CredentialStorePort,
        tokens: TokenPort,
        hasher: Optional[PasswordHasherPort] = None,
        bcrypt_cost: int = 14,
        token_ttl: int = 300,
        login_redirect: str = "dashboard",
        policy: Optional[ValidationPolicy] = None,
    ):
        """
        Initialize auth client with adapters.

        Args:
            store: Credential store adapter (required)
            tokens: Token adapter holding the process signing context (required)
            hasher: Password hasher (default bcrypt)
            bcrypt_cost: Work factor for new password hashes
            token_ttl: Token validity window in seconds
            login_redirect: Post-login destination hint
            policy: Structural input limits
        """
        hasher = hasher or BcryptPasswordHasher()
        policy = policy or ValidationPolicy()

        self._registration = RegistrationService(store, hasher, cost=bcrypt_cost, policy=policy)
        self._authentication = AuthenticationService(
            store,
            hasher,
            tokens,
            ttl=token_ttl,
            redirect=login_redirect,
            cost=bcrypt_cost,
            policy=policy,
        )
        self._gate = BearerTokenGate(tokens)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        store: Optional[CredentialStorePort] = None,
    ) -> "AuthClient":
        """
        Build a client from Settings.

        The signing context is created here, once, and lives as long as the
        client. Pass ``store`` to override the configured backend.
        """
        settings = settings or get_settings()
        signing = build_signing_context(settings)
        if store is None:
            store = build_credential_store(settings)
        return cls(
            store=store,
            tokens=JWTTokenAdapter(signing, leeway=settings.token_leeway_seconds),
            bcrypt_cost=settings.bcrypt_cost,
            token_ttl=settings.token_ttl_seconds,
            login_redirect=settings.login_redirect,
            policy=settings.validation_policy(),
        )

    def signup(self, payload: Dict[str, Any]) -> Credential:
        """
        Register a credential.

        Args:
            payload: Signup data

        Returns:
            Stored credential (no token is issued)
        """
        return self._registration.register(payload)

    def login(self, payload: Dict[str, Any], now: Optional[datetime] = None) -> LoginResult:
        """
        Authenticate a user.

        Args:
            payload: Login data
            now: Issuance instant (defaults to current time)

        Returns:
            LoginResult with token and redirect hint
        """
        return self._authentication.login(payload, now=now)

    def authorize(self, header_value: Optional[str], now: Optional[datetime] = None) -> RequestIdentity:
        """
        Verify an Authorization header.

        Args:
            header_value: "Bearer <token>"
            now: Instant to check expiry against

        Returns:
            Identity for the request
        """
        return self._gate.authorize(header_value, now=now)


def build_credential_store(settings: Settings) -> CredentialStorePort:
    """Create the configured credential store adapter."""
    if settings.store_backend == "redis":
        from tokengate.adapters.redis_store import RedisCredentialStore
        return RedisCredentialStore(
            url=settings.redis_url,
            prefix=settings.redis_prefix,
            timeout=settings.redis_timeout_seconds,
        )

    if settings.store_backend == "dynamodb":
        from tokengate.adapters.dynamodb_store import DynamoDBCredentialStore
        return DynamoDBCredentialStore(
            table_name=settings.dynamodb_table,
            region_name=settings.dynamodb_region,
            timeout=settings.dynamodb_timeout_seconds,
        )

    logger.warning("Using in-memory credential store; accounts are lost on restart")
    return MemoryCredentialStore()


def build_secret_source(settings: Settings) -> Optional[SecretSourcePort]:
    """Create the configured secret source, or None."""
    if settings.secret_source == "env":
        from tokengate.adapters.env_secret import EnvSecretSource
        return EnvSecretSource()

    if settings.secret_source == "vault":
        from tokengate.adapters.vault_secret import VaultSecretSource
        token = settings.vault_token.get_secret_value() if settings.vault_token else None
        return VaultSecretSource(
            url=settings.vault_url,
            token=token,
            mount_point=settings.vault_mount_point,
            path_prefix=settings.vault_path_prefix,
        )

    if settings.secret_source == "aws":
        from tokengate.adapters.aws_secret import AWSSecretsSource
        return AWSSecretsSource(
            region_name=settings.aws_region,
            prefix=settings.aws_secret_prefix,
        )

    return None


def build_signing_context(
    settings: Settings,
    source: Optional[SecretSourcePort] = None,
) -> SigningContext:
    """
    Create the process-wide signing context.

    Order: explicit signing_secret, then the configured secret source,
    then a random key valid only for this process.

    Raises:
        SecretSourceError: A secret source is configured but holds no key
    """
    params = {"algorithm": settings.token_algorithm, "issuer": settings.token_issuer}

    if settings.signing_secret is not None:
        return SigningContext.from_secret(settings.signing_secret.get_secret_value(), **params)

    source = source or build_secret_source(settings)
    if source is not None:
        secret = source.load(settings.secret_name)
        if not secret:
            raise SecretSourceError(f"Signing secret {settings.secret_name!r} not found")
        return SigningContext.from_secret(secret, **params)

    logger.warning("No signing secret configured; generated a random key for this process")
    return SigningContext.generate(**params)
