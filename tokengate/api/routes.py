"""
Auth API routes - signup, login, and a sample protected route.
"""

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Type

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from tokengate.api.dependencies import get_client, require_identity
from tokengate.domain.token import RequestIdentity
from tokengate.errors import (
    InvalidCredentialsError,
    InvalidInputError,
    MalformedPayloadError,
    ServiceUnavailableError,
    TokenGateError,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


async def _read_json(request: Request) -> Dict[str, Any]:
    """Decode the body as a JSON object."""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MalformedPayloadError()
    if not isinstance(payload, dict):
        raise InvalidInputError()
    return payload


async def _run_with_deadline(
    request: Request,
    func: Callable,
    *args,
    timeout_error: Type[TokenGateError] = ServiceUnavailableError,
):
    """
    Run a blocking flow in a worker thread, bounded by the request timeout.

    The thread is not interrupted on timeout; the response just stops
    waiting for it and raises ``timeout_error``.
    """
    timeout = request.app.state.settings.request_timeout_seconds
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("%s exceeded the %.1fs request deadline", func.__name__, timeout)
        raise timeout_error()


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "healthy"}


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(request: Request) -> Dict[str, str]:
    """Register a new credential. Does not log the user in."""
    payload = await _read_json(request)
    await _run_with_deadline(request, get_client(request).signup, payload)
    return {"message": "User created successfully"}


@router.post("/login")
async def login(request: Request) -> JSONResponse:
    """Login with email + password; the token is returned in body and header."""
    payload = await _read_json(request)
    # A stalled lookup is a lookup failure, reported like any bad login
    result = await _run_with_deadline(
        request,
        get_client(request).login,
        payload,
        timeout_error=InvalidCredentialsError,
    )
    return JSONResponse(
        content=result.to_dict(),
        headers={"Authorization": f"Bearer {result.token}"},
    )


@router.get("/me")
async def me(identity: RequestIdentity = Depends(require_identity)) -> Dict[str, str]:
    """Return the identity carried by the presented token."""
    return identity.to_dict()
