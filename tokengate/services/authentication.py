"""
Authentication flow - verify a password and issue a session token.
"""

import logging
import secrets
from datetime import datetime
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from tokengate.domain.requests import AuthenticationRequest, ValidationPolicy
from tokengate.domain.token import Claims, LoginResult
from tokengate.errors import (
    CredentialStoreError,
    HashingError,
    InternalError,
    InvalidCredentialsError,
    InvalidInputError,
    SigningError,
)
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.ports.password_port import PasswordHasherPort
from tokengate.ports.token_port import TokenPort

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Logs users in.

    Unknown identifier, store failure and wrong password all raise the same
    InvalidCredentialsError; only the logs tell them apart.
    """

    def __init__(
        self,
        store: CredentialStorePort,
        hasher: PasswordHasherPort,
        tokens: TokenPort,
        ttl: int = 300,
        redirect: str = "dashboard",
        cost: int = 14,
        policy: Optional[ValidationPolicy] = None,
    ):
        """
        Args:
            store: Credential store (read only here)
            hasher: Password hasher
            tokens: Token issuer
            ttl: Token validity window in seconds
            redirect: Post-login destination hint
            cost: Work factor of the decoy hash used for unknown identifiers
            policy: Structural input limits
        """
        self._store = store
        self._hasher = hasher
        self._tokens = tokens
        self._ttl = ttl
        self._redirect = redirect
        self._policy = policy or ValidationPolicy()
        # Built up front so no login pays for the extra derive
        self._decoy_hash = self._derive_decoy(cost)

    def _derive_decoy(self, cost: int) -> Optional[str]:
        try:
            return self._hasher.derive(secrets.token_urlsafe(16), cost)
        except HashingError as e:
            logger.warning("Could not build decoy hash: %s", e)
            return None

    def _spend_verify_time(self, password: str) -> None:
        """Run one bcrypt check so unknown identifiers cost as much as known ones."""
        if self._decoy_hash is not None:
            self._hasher.verify(password, self._decoy_hash)

    def login(self, payload: Mapping[str, Any], now: Optional[datetime] = None) -> LoginResult:
        """
        Authenticate and issue a token.

        Args:
            payload: Raw login data (identifier/email, password)
            now: Issuance instant (defaults to current time)

        Returns:
            LoginResult with the token and redirect hint

        Raises:
            InvalidInputError: Structural validation failed
            InvalidCredentialsError: Unknown identifier, wrong or too-short
                password, or store failure
            InternalError: Token signing failed
        """
        try:
            request = AuthenticationRequest.parse(payload, self._policy)
        except ValidationError as e:
            logger.info("Login rejected: %d validation error(s)", e.error_count())
            raise InvalidInputError()

        if len(request.password) < self._policy.password_min_length:
            logger.info("Login with password below minimum length for %s", request.identifier)
            raise InvalidCredentialsError()

        try:
            credential = self._store.find_by_identifier(request.identifier)
        except CredentialStoreError as e:
            logger.warning("Error retrieving credential for %s: %s", request.identifier, e)
            raise InvalidCredentialsError()

        if credential is None:
            logger.info("Login for unknown identifier %s", request.identifier)
            self._spend_verify_time(request.password)
            raise InvalidCredentialsError()

        if not self._hasher.verify(request.password, credential.password_hash):
            logger.info("Wrong password for %s", request.identifier)
            raise InvalidCredentialsError()

        claims = Claims.for_credential(credential, ttl=self._ttl, now=now)
        try:
            token = self._tokens.issue(claims)
        except SigningError as e:
            logger.error("Error signing token for %s: %s", credential.identifier, e)
            raise InternalError() from e

        logger.info("Login: %s (%s)", credential.identifier, credential.role.value)
        return LoginResult(token=token, expires_at=claims.expires_at, redirect=self._redirect)
