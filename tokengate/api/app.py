"""
Application factory.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tokengate import __version__
from tokengate.api.routes import router
from tokengate.config import Settings, get_settings
from tokengate.errors import InternalError, TokenGateError
from tokengate.sdk.client import AuthClient

logger = logging.getLogger(__name__)


def _error_response(error: TokenGateError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"message": error.message})


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[AuthClient] = None,
) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: Settings (default: loaded from environment)
        client: Pre-built AuthClient (default: built from settings)
    """
    settings = settings or get_settings()
    client = client or AuthClient.from_settings(settings)

    app = FastAPI(
        title="tokengate",
        version=__version__,
        description="Credential registration and bearer-token issuance.",
    )
    app.state.settings = settings
    app.state.client = client

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
            expose_headers=["Authorization"],
        )

    @app.exception_handler(TokenGateError)
    async def handle_tokengate_error(request: Request, exc: TokenGateError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error_response(InternalError())

    app.include_router(router)
    return app
