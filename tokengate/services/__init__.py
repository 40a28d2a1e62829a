"""
Services - Signup, login and protected-request flows over the ports.
"""

from tokengate.services.registration import RegistrationService
from tokengate.services.authentication import AuthenticationService
from tokengate.services.token_gate import BearerTokenGate

__all__ = [
    "RegistrationService",
    "AuthenticationService",
    "BearerTokenGate",
]
