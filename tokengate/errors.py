"""
Error taxonomy.

Public errors carry the HTTP status and the message shown to the caller.
Internal errors (store, hashing, signing, secrets) never reach a response
body; services translate them where they are detected.
"""


class TokenGateError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code = 500
    message = "Error processing request"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# 400 - client input

class InvalidInputError(TokenGateError):
    status_code = 400
    message = "Invalid input data"


class MalformedPayloadError(TokenGateError):
    status_code = 400
    message = "Invalid JSON format"


class PasswordMismatchError(TokenGateError):
    status_code = 400
    message = "Passwords do not match"


class DuplicateIdentifierError(TokenGateError):
    status_code = 400
    message = "Email already registered"


# 401 - authorization

class InvalidCredentialsError(TokenGateError):
    status_code = 401
    message = "Invalid email or password"


class MissingAuthorizationError(TokenGateError):
    status_code = 401
    message = "Missing authorization header"


class InvalidTokenError(TokenGateError):
    status_code = 401
    message = "Invalid token"


# 5xx - infrastructure

class InternalError(TokenGateError):
    status_code = 500


class ServiceUnavailableError(TokenGateError):
    status_code = 503


# Internal errors raised by adapters

class CredentialStoreError(Exception):
    """Credential store unreachable or returned an unusable result."""


class DuplicateCredentialError(CredentialStoreError):
    """Insert rejected because the identifier already exists."""


class HashingError(Exception):
    """Password hashing backend failed (e.g. entropy source)."""


class SigningError(Exception):
    """Token could not be signed."""


class SecretSourceError(Exception):
    """Secret backend failed while loading a secret."""
