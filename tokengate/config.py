"""
Application settings loaded from environment variables.

Every variable is prefixed with ``TOKENGATE_`` (e.g. ``TOKENGATE_BCRYPT_COST``)
and may also come from a ``.env`` file.
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tokengate.domain.requests import ValidationPolicy


class Settings(BaseSettings):
    # ── Signing key ──────────────────────────────────────────────────────
    signing_secret: Optional[SecretStr] = None          # wins over secret_source
    secret_source: Literal["none", "env", "vault", "aws"] = "none"
    secret_name: str = "signing_key"
    vault_url: str = "http://localhost:8200"
    vault_token: Optional[SecretStr] = None
    vault_mount_point: str = "secret"
    vault_path_prefix: str = "tokengate"
    aws_region: str = "us-east-1"
    aws_secret_prefix: str = "tokengate/"

    # ── Tokens ───────────────────────────────────────────────────────────
    token_ttl_seconds: int = Field(300, gt=0)            # 5 minutes
    token_issuer: str = "tokengate"
    token_algorithm: Literal["HS256", "HS384", "HS512"] = "HS256"
    token_leeway_seconds: int = Field(0, ge=0)
    login_redirect: str = "dashboard"

    # ── Passwords & input rules ──────────────────────────────────────────
    bcrypt_cost: int = Field(14, ge=4, le=31)
    password_min_length: int = Field(8, ge=1)
    identifier_min_length: int = Field(5, ge=3)
    identifier_max_length: int = Field(20, ge=3)

    # ── Credential store ─────────────────────────────────────────────────
    store_backend: Literal["memory", "redis", "dynamodb"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    redis_prefix: str = "tokengate:credential:"
    redis_timeout_seconds: float = 5.0
    dynamodb_table: str = "tokengate-credentials"
    dynamodb_region: str = "us-east-1"
    dynamodb_timeout_seconds: float = 5.0

    # ── Server ───────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 4000
    request_timeout_seconds: float = Field(10.0, gt=0)
    cors_origins: List[str] = []
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TOKENGATE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def validation_policy(self) -> ValidationPolicy:
        return ValidationPolicy(
            identifier_min_length=self.identifier_min_length,
            identifier_max_length=self.identifier_max_length,
            password_min_length=self.password_min_length,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
