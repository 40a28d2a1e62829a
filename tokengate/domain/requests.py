"""
Request Models - Transient signup/login inputs and their structural rules.

Bounds come from a ValidationPolicy passed as pydantic validation context,
so the same models serve any configured limits.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from tokengate.domain.credential import Role


@dataclass(frozen=True)
class ValidationPolicy:
    """Structural limits for identifiers and passwords."""
    identifier_min_length: int = 5
    identifier_max_length: int = 20
    password_min_length: int = 8


DEFAULT_POLICY = ValidationPolicy()


def _policy(info: ValidationInfo) -> ValidationPolicy:
    if info.context and "policy" in info.context:
        return info.context["policy"]
    return DEFAULT_POLICY


class _CredentialInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, hide_input_in_errors=True)

    identifier: str = Field(validation_alias=AliasChoices("identifier", "email"))
    password: str = Field(min_length=1, repr=False)

    @field_validator("identifier")
    @classmethod
    def check_identifier(cls, value: str, info: ValidationInfo) -> str:
        policy = _policy(info)
        if not policy.identifier_min_length <= len(value) <= policy.identifier_max_length:
            raise ValueError("identifier length out of bounds")
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError("identifier is not an email address") from e
        # Stored exactly as given (case-sensitive)
        return value

    @classmethod
    def parse(cls, payload: Mapping[str, Any], policy: Optional[ValidationPolicy] = None):
        """
        Validate a raw payload.

        Raises:
            pydantic.ValidationError: If any structural rule fails
        """
        return cls.model_validate(payload, context={"policy": policy or DEFAULT_POLICY})


class AuthenticationRequest(_CredentialInput):
    """
    Login input: identifier and plaintext password.

    The password only has to be present here. A password below the minimum
    length cannot match any stored credential, so the login flow rejects it
    as invalid credentials rather than invalid input.
    """


class RegistrationRequest(_CredentialInput):
    """
    Signup input.

    Structural validation only requires the confirmation to be present;
    equality with the password is checked separately by the registration flow.
    """
    confirm_password: str = Field(
        min_length=1,
        repr=False,
        validation_alias=AliasChoices("confirm_password", "confirmPassword"),
    )
    role: Role

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str, info: ValidationInfo) -> str:
        if len(value) < _policy(info).password_min_length:
            raise ValueError("password too short")
        return value
