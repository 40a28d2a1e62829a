"""
Registration flow - validate, check uniqueness, hash, persist.
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from tokengate.domain.credential import Credential
from tokengate.domain.requests import RegistrationRequest, ValidationPolicy
from tokengate.errors import (
    CredentialStoreError,
    DuplicateCredentialError,
    DuplicateIdentifierError,
    HashingError,
    InternalError,
    InvalidInputError,
    PasswordMismatchError,
)
from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.ports.password_port import PasswordHasherPort

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Creates credentials. Registration never logs the user in.

    Each step runs only if the previous one passed, and the store is
    written at most once, as the final step.
    """

    def __init__(
        self,
        store: CredentialStorePort,
        hasher: PasswordHasherPort,
        cost: int = 14,
        policy: Optional[ValidationPolicy] = None,
    ):
        """
        Args:
            store: Credential store
            hasher: Password hasher
            cost: Work factor for new password hashes
            policy: Structural input limits
        """
        self._store = store
        self._hasher = hasher
        self._cost = cost
        self._policy = policy or ValidationPolicy()

    def register(self, payload: Mapping[str, Any]) -> Credential:
        """
        Register a new credential.

        Args:
            payload: Raw signup data (identifier/email, password,
                confirm_password, role)

        Returns:
            The stored credential

        Raises:
            InvalidInputError: Structural validation failed
            DuplicateIdentifierError: Identifier already registered
            PasswordMismatchError: Confirmation differs from password
            InternalError: Store or hashing failure
        """
        try:
            request = RegistrationRequest.parse(payload, self._policy)
        except ValidationError as e:
            logger.info("Signup rejected: %d validation error(s)", e.error_count())
            raise InvalidInputError()

        try:
            existing = self._store.find_by_identifier(request.identifier)
        except CredentialStoreError as e:
            logger.error("Error checking identifier %s: %s", request.identifier, e)
            raise InternalError() from e

        if existing is not None:
            raise DuplicateIdentifierError()

        if request.password != request.confirm_password:
            raise PasswordMismatchError()

        try:
            password_hash = self._hasher.derive(request.password, self._cost)
        except HashingError as e:
            logger.error("Error hashing password for %s: %s", request.identifier, e)
            raise InternalError() from e

        credential = Credential(
            identifier=request.identifier,
            password_hash=password_hash,
            role=request.role,
        )

        try:
            self._store.insert(credential)
        except DuplicateCredentialError:
            # Concurrent signup won the race between lookup and insert
            logger.info("Duplicate insert rejected by store for %s", request.identifier)
            raise DuplicateIdentifierError()
        except CredentialStoreError as e:
            logger.error("Error storing credential %s: %s", request.identifier, e)
            raise InternalError() from e

        logger.info("Registered %s (%s)", credential.identifier, credential.role.value)
        return credential
