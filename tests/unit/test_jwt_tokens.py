"""
Unit tests for JWT issuance and verification.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from tokengate.adapters.jwt_tokens import JWTTokenAdapter
from tokengate.domain.credential import Credential, Role
from tokengate.domain.token import Claims, SigningContext
from tokengate.errors import InvalidTokenError

NOW = datetime(2030, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
TTL = 300


class TestJWTTokenAdapter:
    """Test token issuance and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.signing = SigningContext.from_secret("k" * 32)
        self.tokens = JWTTokenAdapter(self.signing)
        self.credential = Credential(identifier="user@test.io", password_hash="x", role=Role.GUEST)

    def issue(self, now=NOW, ttl=TTL):
        return self.tokens.issue(Claims.for_credential(self.credential, ttl=ttl, now=now))

    def test_token_has_three_parts(self):
        """Test compact header.payload.signature format."""
        token = self.issue()
        assert token.count(".") == 2
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_verify_at_issuance(self):
        """Test a token is valid at issuance + 0."""
        claims = self.tokens.verify(self.issue(), now=NOW)

        assert claims.identifier == "user@test.io"
        assert claims.role == Role.GUEST
        assert claims.expires_at == NOW + timedelta(seconds=TTL)

    def test_verify_just_before_expiry(self):
        """Test a token is valid until the end of its window."""
        self.tokens.verify(self.issue(), now=NOW + timedelta(seconds=TTL - 1))

    def test_rejects_after_expiry(self):
        """Test a token is rejected at issuance + W + epsilon."""
        token = self.issue()
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=NOW + timedelta(seconds=TTL + 1))

    def test_naive_now_is_read_as_utc(self):
        """Test a timezone-naive instant is treated as UTC."""
        token = self.issue()
        naive = NOW.replace(tzinfo=None)

        assert self.tokens.verify(token, now=naive).expires_at == NOW + timedelta(seconds=TTL)
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=naive + timedelta(seconds=TTL + 1))

    def test_naive_issuance_instant(self):
        claims = Claims.for_credential(self.credential, ttl=TTL, now=NOW.replace(tzinfo=None))
        assert claims.issued_at == NOW

    def test_leeway_extends_acceptance(self):
        """Test clock-skew leeway is honoured."""
        tokens = JWTTokenAdapter(self.signing, leeway=30)
        token = self.issue()
        tokens.verify(token, now=NOW + timedelta(seconds=TTL + 10))

    def test_verify_with_real_clock(self):
        """Test PyJWT's own expiry checks with the current time."""
        fresh = self.issue(now=datetime.now(timezone.utc))
        assert self.tokens.verify(fresh).identifier == "user@test.io"

        stale = self.issue(now=datetime.now(timezone.utc) - timedelta(hours=1))
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(stale)

    def test_different_key_rejects(self):
        """Test a token signed with another key never verifies."""
        other = JWTTokenAdapter(SigningContext.generate())
        with pytest.raises(InvalidTokenError):
            other.verify(self.issue(), now=NOW)

    def test_tampered_payload_rejects(self):
        """Test changing claims breaks the signature."""
        header, _, signature = self.issue().split(".")
        forged_payload = jwt.encode(
            {"sub": "user@test.io", "role": "admin", "iat": NOW, "exp": NOW + timedelta(days=1), "iss": "tokengate"},
            "another-key-of-sufficient-length!",
            algorithm="HS256",
        ).split(".")[1]

        with pytest.raises(InvalidTokenError):
            self.tokens.verify(f"{header}.{forged_payload}.{signature}", now=NOW)

    def test_wrong_issuer_rejects(self):
        """Test tokens from another issuer are rejected even with the same key."""
        foreign = JWTTokenAdapter(SigningContext.from_secret("k" * 32, issuer="someone-else"))
        token = foreign.issue(Claims.for_credential(self.credential, ttl=TTL, now=NOW))

        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=NOW)

    def test_none_algorithm_rejects(self):
        """Test unsigned tokens are rejected."""
        token = jwt.encode(
            {"sub": "user@test.io", "role": "guest", "iat": NOW, "exp": NOW + timedelta(seconds=TTL), "iss": "tokengate"},
            None,
            algorithm="none",
        )
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=NOW)

    def test_unknown_role_rejects(self):
        """Test a correctly signed token with an unknown role is rejected."""
        token = jwt.encode(
            {"sub": "user@test.io", "role": "root", "iat": NOW, "exp": NOW + timedelta(seconds=TTL), "iss": "tokengate"},
            self.signing.key,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=NOW)

    def test_missing_claims_reject(self):
        """Test tokens without exp are rejected."""
        token = jwt.encode(
            {"sub": "user@test.io", "role": "guest", "iat": NOW, "iss": "tokengate"},
            self.signing.key,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            self.tokens.verify(token, now=NOW)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.invalid"])
    def test_malformed_rejects(self, token):
        """Test malformed tokens all raise the same error."""
        with pytest.raises(InvalidTokenError) as exc_info:
            self.tokens.verify(token, now=NOW)
        assert exc_info.value.message == "Invalid token"


class TestSigningContext:
    """Test signing key ownership."""

    def test_generate_is_random(self):
        assert SigningContext.generate().key != SigningContext.generate().key

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError):
            SigningContext.from_secret("too-short")

    def test_repr_hides_key(self):
        assert "k" * 32 not in repr(SigningContext.from_secret("k" * 32))

    def test_context_is_immutable(self):
        import dataclasses

        signing = SigningContext.generate()
        with pytest.raises(dataclasses.FrozenInstanceError):
            signing.key = b"x" * 32
