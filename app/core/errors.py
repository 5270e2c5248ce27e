# File: app/core/errors.py

"""
Error types surfaced over HTTP and the handlers that render them.

Every error body has the shape ``{"message": "..."}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class AuthenticationMissing(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "No token provided"


class AuthenticationInvalid(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid token"


class CredentialMismatch(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _message(exc.status_code, exc.message)


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.info("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return _message(status.HTTP_409_CONFLICT, "Resource conflicts with an existing record")


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database failure on %s %s", request.method, request.url.path)
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    # Starlette resolves handlers by MRO, so IntegrityError wins over SQLAlchemyError.
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
