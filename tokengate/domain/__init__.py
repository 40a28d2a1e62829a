"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from tokengate.domain.credential import Credential, Role
from tokengate.domain.token import Claims, SigningContext, RequestIdentity, LoginResult
from tokengate.domain.requests import RegistrationRequest, AuthenticationRequest, ValidationPolicy

__all__ = [
    "Credential",
    "Role",
    "Claims",
    "SigningContext",
    "RequestIdentity",
    "LoginResult",
    "RegistrationRequest",
    "AuthenticationRequest",
    "ValidationPolicy",
]
