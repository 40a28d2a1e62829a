"""
Ports - Interfaces for credential storage, hashing, tokens and secrets.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from tokengate.ports.credential_store_port import CredentialStorePort
from tokengate.ports.password_port import PasswordHasherPort
from tokengate.ports.token_port import TokenPort
from tokengate.ports.secret_source_port import SecretSourcePort

__all__ = [
    "CredentialStorePort",
    "PasswordHasherPort",
    "TokenPort",
    "SecretSourcePort",
]
