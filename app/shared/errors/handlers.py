"""
Centralized error mapping for FastAPI.

Maps domain errors and outcomes to response envelopes, and registers
catch-all handlers for everything that is not a domain error.
No stack traces or internal details are exposed to clients unless
the application runs outside production.
All error responses use the response envelope.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.responses import Response

from app.domain.identity.errors import DomainError, ErrorKind
from app.domain.identity.result import Failure, Result
from app.shared import envelope
from app.shared.envelope import ResponseEnvelope

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_429 = 429
HTTP_500 = 500

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.REGISTRATION: "REGISTRATION_FAILED",
    ErrorKind.VERIFICATION: "VERIFICATION_FAILED",
    ErrorKind.AUTHENTICATION: "AUTHENTICATION_FAILED",
    ErrorKind.USER_NOT_FOUND: "USER_NOT_FOUND",
    ErrorKind.PASSWORD_RESET: "PASSWORD_RESET_FAILED",
    ErrorKind.VERIFY_ATTRIBUTE: "ATTRIBUTE_VERIFICATION_FAILED",
    ErrorKind.RESEND_OTP: "RESEND_CODE_FAILED",
    ErrorKind.INTERNAL: envelope.INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status for a domain error kind."""
    return HTTP_500 if kind is ErrorKind.INTERNAL else HTTP_400


def envelope_for_error(error: DomainError) -> ResponseEnvelope:
    """Build the error envelope for a domain error."""
    return envelope.error(
        error.message,
        status_code=status_for(error.kind),
        error_code=ERROR_CODES[error.kind],
    )


def envelope_for_outcome(outcome: Result[Any]) -> ResponseEnvelope:
    """Build the envelope for any gateway outcome."""
    if isinstance(outcome, Failure):
        return envelope_for_error(outcome.error)
    return envelope.success(outcome.value)


def internal_error_envelope(details: Any = None) -> ResponseEnvelope:
    """Generic 500 envelope with a fixed public message."""
    return envelope.error(
        UNEXPECTED_ERROR_MESSAGE,
        status_code=HTTP_500,
        error_code=ERROR_CODES[ErrorKind.INTERNAL],
        details=details,
    )


def register_error_handlers(app: FastAPI, expose_details: bool = False) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        expose_details: Attach the real cause of 500 responses as
            ``details``. Must be False in production.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Malformed or wrongly typed request bodies."""
        logger.warning("Rejected malformed request body (%d errors)", len(exc.errors()))
        details = jsonable_errors(exc) if expose_details else None
        return internal_error_envelope(details).to_response()

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        _request: Request, exc: RateLimitExceeded
    ) -> Response:
        """Too many requests from one client."""
        logger.warning("Rate limit exceeded: %s", exc.detail)
        return envelope.error(
            "Rate limit exceeded",
            status_code=HTTP_429,
            error_code=RATE_LIMIT_EXCEEDED,
            details=str(exc.detail),
        ).to_response()

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        details = (
            {"type": type(exc).__name__, "message": str(exc)} if expose_details else None
        )
        return internal_error_envelope(details).to_response()


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors reduced to JSON-safe fields."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
