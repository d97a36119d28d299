"""
Exception handlers - render every failure as ``{"message": ...}``.

Domain errors map to a status code by category. Anything unexpected is
logged and reported as a generic 500 so internals never leak.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storifal.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    EmailNotVerified,
    InputError,
    NotFoundError,
    StorifalError,
    TokenError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = "Invalid request body."

# Checked in order; the first matching category wins
_STATUS_BY_CATEGORY: list[tuple[type[StorifalError], int]] = [
    (InputError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (TokenError, status.HTTP_400_BAD_REQUEST),
    (EmailNotVerified, status.HTTP_403_FORBIDDEN),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(exc: StorifalError) -> int:
    for category, code in _STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def storifal_error_handler(request: Request, exc: StorifalError) -> JSONResponse:
    code = status_for(exc)
    if code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unmapped domain error on %s: %r", request.url.path, exc)
        return JSONResponse(status_code=code, content={"message": INTERNAL_ERROR_MESSAGE})
    return JSONResponse(status_code=code, content={"message": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_BODY_MESSAGE},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the ``{"message": ...}`` error handlers on ``app``."""
    app.add_exception_handler(StorifalError, storifal_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
