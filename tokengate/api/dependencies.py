"""
FastAPI dependencies.

``require_identity`` is the protected-request gate: routes that depend on it
only run with a verified token, and find the identity on ``request.state``.
"""

from typing import Optional

from fastapi import Header, Request

from tokengate.domain.token import RequestIdentity
from tokengate.sdk.client import AuthClient


def get_client(request: Request) -> AuthClient:
    """Return the AuthClient bound to the app."""
    return request.app.state.client


def require_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> RequestIdentity:
    """
    Verify the Bearer token and attach the identity to the request.

    Raises ``MissingAuthorizationError`` / ``InvalidTokenError`` (401),
    rendered by the app's error handler.
    """
    identity = get_client(request).authorize(authorization)
    request.state.identity = identity
    return identity
