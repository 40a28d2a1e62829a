"""
Unit tests for signup/login input validation.
"""

import pytest
from pydantic import ValidationError
from tokengate.domain.credential import Role
from tokengate.domain.requests import AuthenticationRequest, RegistrationRequest, ValidationPolicy


def signup_payload(**overrides):
    payload = {
        "email": "user@test.io",
        "password": "longenough1",
        "confirm_password": "longenough1",
        "role": "guest",
    }
    payload.update(overrides)
    return payload


def test_valid_registration():
    """Test a well-formed signup payload."""
    request = RegistrationRequest.parse(signup_payload())

    assert request.identifier == "user@test.io"
    assert request.role == Role.GUEST


def test_identifier_aliases():
    """Test identifier/email and confirmPassword spellings are accepted."""
    request = RegistrationRequest.parse({
        "identifier": "user@test.io",
        "password": "longenough1",
        "confirmPassword": "longenough1",
        "role": "admin",
    })

    assert request.identifier == "user@test.io"
    assert request.role == Role.ADMIN


def test_identifier_case_preserved():
    """Test identifiers are kept exactly as given."""
    request = AuthenticationRequest.parse({"email": "User@Test.IO", "password": "longenough1"})
    assert request.identifier == "User@Test.IO"


@pytest.mark.parametrize("overrides", [
    {"email": "not-an-email"},
    {"email": "a@b"},                          # too short
    {"email": "someone.long@domain.io"},     # over 20 characters
    {"email": 12345},
    {"password": "short"},
    {"confirm_password": ""},
    {"role": "superuser"},
])
def test_invalid_registration(overrides):
    """Test each structural rule rejects."""
    with pytest.raises(ValidationError):
        RegistrationRequest.parse(signup_payload(**overrides))


@pytest.mark.parametrize("missing", ["email", "password", "confirm_password", "role"])
def test_missing_field(missing):
    """Test every signup field is required."""
    payload = signup_payload()
    del payload[missing]

    with pytest.raises(ValidationError):
        RegistrationRequest.parse(payload)


def test_mismatch_is_not_structural():
    """Test confirmation equality is left to the registration flow."""
    request = RegistrationRequest.parse(signup_payload(confirm_password="different1"))
    assert request.password != request.confirm_password


def test_policy_bounds():
    """Test custom limits are applied through the policy."""
    policy = ValidationPolicy(identifier_max_length=40, password_min_length=12)

    request = RegistrationRequest.parse(
        signup_payload(email="someone.long@domain.io", password="twelve-chars", confirm_password="twelve-chars"),
        policy,
    )
    assert request.identifier == "someone.long@domain.io"

    with pytest.raises(ValidationError):
        RegistrationRequest.parse(
            signup_payload(password="elevenchars", confirm_password="elevenchars"), policy
        )


def test_login_password_only_needs_presence():
    """Test login leaves the minimum length to the authentication flow."""
    request = AuthenticationRequest.parse({"email": "user@test.io", "password": "wrong"})
    assert request.password == "wrong"

    with pytest.raises(ValidationError):
        AuthenticationRequest.parse({"email": "user@test.io", "password": ""})


def test_errors_hide_password():
    """Test validation errors never echo the password back."""
    with pytest.raises(ValidationError) as exc_info:
        RegistrationRequest.parse(signup_payload(password="secret", confirm_password="secret"))

    assert "secret" not in str(exc_info.value)
