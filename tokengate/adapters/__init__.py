"""
Adapters - Implementations of ports.

Hashing & Tokens:
- BcryptPasswordHasher: SHA pre-digest + bcrypt
- JWTTokenAdapter: HMAC-signed JWT session tokens

Credential Storage:
- MemoryCredentialStore: In-memory (testing)
- RedisCredentialStore: Redis with SET NX
- DynamoDBCredentialStore: DynamoDB conditional puts

Secret Sources (signing key):
- EnvSecretSource: Environment variables
- VaultSecretSource: HashiCorp Vault KV v2
- AWSSecretsSource: AWS Secrets Manager

Redis, DynamoDB, Vault and AWS adapters import their client libraries
lazily, so the extras are only needed when those backends are used.
"""

from tokengate.adapters.bcrypt_hasher import BcryptPasswordHasher
from tokengate.adapters.jwt_tokens import JWTTokenAdapter
from tokengate.adapters.memory_store import MemoryCredentialStore
from tokengate.adapters.redis_store import RedisCredentialStore
from tokengate.adapters.dynamodb_store import DynamoDBCredentialStore
from tokengate.adapters.env_secret import EnvSecretSource
from tokengate.adapters.vault_secret import VaultSecretSource
from tokengate.adapters.aws_secret import AWSSecretsSource

__all__ = [
    "BcryptPasswordHasher",
    "JWTTokenAdapter",
    "MemoryCredentialStore",
    "RedisCredentialStore",
    "DynamoDBCredentialStore",
    "EnvSecretSource",
    "VaultSecretSource",
    "AWSSecretsSource",
]
