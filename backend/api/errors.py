"""
Exception handlers.

Maps the shared exception hierarchy to HTTP responses so route handlers
can let domain errors propagate.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    DevConnectorError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)
from modules.github.exceptions import UpstreamError, UpstreamNotFoundError
from .models.errors import ErrorItem, ErrorListResponse, MessageResponse

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


def _error_list(status_code: int, items: list[ErrorItem]) -> JSONResponse:
    body = ErrorListResponse(errors=items).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


def _message(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageResponse(msg=msg).model_dump())


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_list(
        status.HTTP_400_BAD_REQUEST,
        [ErrorItem(**error) for error in exc.errors],
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same shape as ValidationError."""
    items = [
        ErrorItem(msg=error["msg"], param=str(error["loc"][-1]) if error.get("loc") else None)
        for error in exc.errors()
    ]
    return _error_list(status.HTTP_400_BAD_REQUEST, items)


async def handle_rejected_request(request: Request, exc: DevConnectorError) -> JSONResponse:
    """Conflicts and bad credentials are reported like validation errors."""
    return _error_list(status.HTTP_400_BAD_REQUEST, [ErrorItem(msg=exc.message)])


async def handle_authorization_error(request: Request, exc: AuthorizationError) -> JSONResponse:
    return _message(status.HTTP_401_UNAUTHORIZED, exc.message)


async def handle_not_found_error(request: Request, exc: DevConnectorError) -> JSONResponse:
    return _message(status.HTTP_404_NOT_FOUND, exc.message)


async def handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    return _message(status.HTTP_502_BAD_GATEWAY, exc.message)


async def handle_server_error(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and answer without internal detail."""
    if isinstance(exc, DevConnectorError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    else:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the app.

    Starlette picks the handler registered for the closest class in the
    exception's MRO, so specific classes win over DevConnectorError.
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(ConflictError, handle_rejected_request)
    app.add_exception_handler(AuthenticationError, handle_rejected_request)
    app.add_exception_handler(AuthorizationError, handle_authorization_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(UpstreamNotFoundError, handle_not_found_error)
    app.add_exception_handler(UpstreamError, handle_upstream_error)
    app.add_exception_handler(DevConnectorError, handle_server_error)
    app.add_exception_handler(Exception, handle_server_error)
