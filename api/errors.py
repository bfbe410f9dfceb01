"""
API Error Handling

Maps core exceptions and request validation failures onto the response
envelope. Client errors get a 400 with a message; unexpected failures get
a 500 with a generic message and are logged with their traceback.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models.responses import ResponseEnvelope
from core.schemas.errors import ErrorCodes, ForgeException


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ResponseEnvelope[Any].fail(message).model_dump(),
    )


def status_for(exc: ForgeException) -> int:
    """HTTP status for a core exception."""
    if exc.code in (ErrorCodes.INVALID_INPUT, ErrorCodes.CONSTRUCTION_ERROR):
        return 400
    return 500


def describe_validation_error(exc: RequestValidationError) -> str:
    """Render the first request validation error as a short message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    missing = [
        str(err["loc"][-1])
        for err in errors
        if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(loc)
    if field:
        return f"Invalid {field}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


async def forge_error_handler(request: Request, exc: ForgeException) -> JSONResponse:
    """Handle InvalidInput, ConstructionError and InternalError."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc!r}", exc_info=exc)
        return _envelope(status_code, INTERNAL_ERROR_MESSAGE)

    logger.info(f"{request.url.path} rejected: {exc.code}")
    return _envelope(status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed or incomplete request bodies."""
    message = describe_validation_error(exc)
    logger.info(f"{request.url.path} rejected: {message}")
    return _envelope(400, message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap routing errors (404, 405) in the envelope."""
    return _envelope(exc.status_code, str(exc.detail))


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled error on {request.url.path}", exc_info=exc)
    return _envelope(500, INTERNAL_ERROR_MESSAGE)
