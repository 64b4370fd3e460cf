"""Centralized exception handlers for the FastAPI application.

OAuth sign-in errors are mapped to their HTTP status with a consistent
body:

    {
        "success": false,
        "error": "Human-readable error message",
        "kind": "PendingApproval",
        "retryable": false,
        "details": null
    }
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from voicehub_identity.exceptions import InvalidInputError, OAuthError

logger = logging.getLogger(__name__)


def _create_error_response(
    status_code: int,
    message: str,
    kind: str,
    retryable: bool = False,
    details: Any = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "kind": kind,
            "retryable": retryable,
            "details": jsonable_encoder(details),
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application."""

    @app.exception_handler(OAuthError)
    async def oauth_exception_handler(
        request: Request,
        exc: OAuthError,
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "OAuth sign-in failed on %s %s: %s (kind=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.kind,
                exc_info=exc.__cause__ is not None,
            )
        else:
            logger.warning(
                "OAuth sign-in rejected on %s %s: %s (kind=%s, details=%s)",
                request.method,
                request.url.path,
                exc.message,
                exc.kind,
                exc.details,
            )

        return _create_error_response(
            status_code=exc.status_code,
            message=exc.message,
            kind=exc.kind,
            retryable=exc.retryable,
            details=exc.details,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(
            "Invalid request on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _create_error_response(
            status_code=InvalidInputError.status_code,
            message="Invalid input",
            kind=InvalidInputError.kind,
            details=exc.errors(),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all for anything the handlers above do not cover."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            kind="InternalError",
        )
