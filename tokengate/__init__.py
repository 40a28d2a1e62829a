"""
tokengate - Credential registration & bearer-token issuance

Hexagonal architecture: password hashing, credential storage and token
signing are ports with swappable adapters; the flows live in services.

Usage:
    from tokengate import AuthClient, SigningContext
    from tokengate.adapters import JWTTokenAdapter, RedisCredentialStore

    client = AuthClient(
        store=RedisCredentialStore(url="redis://localhost"),
        tokens=JWTTokenAdapter(SigningContext.generate()),
    )

    # Register, then log in
    client.signup(signup_payload)
    result = client.login(login_payload)

    # Protected request
    identity = client.authorize(f"Bearer {result.token}")
"""

__version__ = "0.1.0"

from tokengate.sdk.client import AuthClient
from tokengate.domain.credential import Credential, Role
from tokengate.domain.token import Claims, SigningContext, RequestIdentity, LoginResult

__all__ = [
    "AuthClient",
    "Credential",
    "Role",
    "Claims",
    "SigningContext",
    "RequestIdentity",
    "LoginResult",
]
