"""Translate domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from newshub.exceptions import (
    ArticleNotFoundError,
    ArticleValidationError,
    AuthenticationError,
    NewsHubError,
    PermissionDeniedError,
    RemoteOperationError,
    UploadTooLargeError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[NewsHubError], int] = {
    ArticleValidationError: status.HTTP_400_BAD_REQUEST,
    ArticleNotFoundError: status.HTTP_404_NOT_FOUND,
    UploadTooLargeError: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    RemoteOperationError: status.HTTP_502_BAD_GATEWAY,
}


def status_for(error: NewsHubError) -> int:
    for error_type in type(error).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def newshub_error_handler(request: Request, exc: NewsHubError) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = status_for(exc)
    logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message},
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NewsHubError, newshub_error_handler)
