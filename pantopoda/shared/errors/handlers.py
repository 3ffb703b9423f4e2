"""
Centralized error handlers for FastAPI.

Maps validation and upstream-call errors to JSON API responses.
Upstream bodies and internal details are never exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pantopoda.domain.http.errors import (
    DecodeError,
    PantopodaError,
    ResponseError,
    TransportError,
)
from pantopoda.domain.http.status import status_for
from pantopoda.domain.validation.errors import RequestValidationFailed
from pantopoda.domain.validation.model import ErrorType
from pantopoda.interfaces.api.response import Payload, respond

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register pantopoda error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationFailed)
    async def handle_validation_failed(
        _request: Request, exc: RequestValidationFailed
    ) -> JSONResponse:
        """Render a failed request validation."""
        validation_error = exc.validation_error
        if validation_error.error_type is ErrorType.BAD_REQUEST:
            logger.warning("Bad request: payload could not be validated")
            return respond(
                ErrorType.BAD_REQUEST.value,
                status_for("bad_request"),
                Payload(message="Malformed request"),
            )
        logger.warning(
            "Validation failed on fields: %s", ", ".join(validation_error.error_bag)
        )
        return respond(
            ErrorType.RULE_VIOLATION.value,
            status_for("unprocessable_entity"),
            Payload(
                message="Validation failed",
                data={"errors": validation_error.error_bag.to_dict()},
            ),
        )

    @app.exception_handler(ResponseError)
    async def handle_upstream_response(
        _request: Request, exc: ResponseError
    ) -> JSONResponse:
        """Handle an upstream call answered with a failure status."""
        logger.warning("Upstream call failed: %s", exc.status)
        return respond(
            "upstream_error",
            status_for("bad_gateway"),
            Payload(message="Upstream service error"),
        )

    @app.exception_handler(TransportError)
    async def handle_transport(_request: Request, exc: TransportError) -> JSONResponse:
        """Handle an upstream call that never got a response."""
        logger.error("Upstream call to %s failed: %s", exc.endpoint, exc.cause)
        return respond(
            "upstream_unavailable",
            status_for("bad_gateway"),
            Payload(message="Upstream service unavailable"),
        )

    @app.exception_handler(DecodeError)
    async def handle_decode(_request: Request, exc: DecodeError) -> JSONResponse:
        """Handle an upstream body that did not match the expected shape."""
        logger.error("Upstream response could not be decoded: %s", exc.reason)
        return respond(
            "upstream_invalid_response",
            status_for("bad_gateway"),
            Payload(message="Upstream service returned an invalid response"),
        )

    @app.exception_handler(PantopodaError)
    async def handle_pantopoda(_request: Request, exc: PantopodaError) -> JSONResponse:
        """Catch-all for other pantopoda errors. Never exposes internals."""
        logger.error("Unhandled pantopoda error: %s", exc.message)
        return respond(
            "internal_error",
            status_for("internal_server_error"),
            Payload(message="Internal server error"),
        )
