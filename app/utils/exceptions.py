import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.utils.response import error_response

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND_OR_MISMATCH = "not_found_or_mismatch"
    UNAUTHORIZED = "unauthorized"
    STORE = "store"


# (status code, client-facing message)
ERROR_MAP: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (400, "Invalid request body"),
    ErrorKind.DUPLICATE_KEY: (400, "Username or email already exists"),
    ErrorKind.NOT_FOUND_OR_MISMATCH: (404, "Username or password doesn't match"),
    ErrorKind.UNAUTHORIZED: (401, "Please, log in"),
    ErrorKind.STORE: (400, "Request could not be processed"),
}


class AppException(Exception):
    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str | None = None, kind: ErrorKind | None = None):
        if kind is not None:
            self.kind = kind
        self.status_code, default_message = ERROR_MAP[self.kind]
        self.message = message or default_message
        super().__init__(self.message)


class ValidationError(AppException):
    kind = ErrorKind.VALIDATION


class DuplicateKeyError(AppException):
    kind = ErrorKind.DUPLICATE_KEY


class NotFoundOrMismatch(AppException):
    kind = ErrorKind.NOT_FOUND_OR_MISMATCH


class Unauthorized(AppException):
    kind = ErrorKind.UNAUTHORIZED


class StoreError(AppException):
    kind = ErrorKind.STORE


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        status_code, message = ERROR_MAP[ErrorKind.VALIDATION]
        return JSONResponse(status_code=status_code, content=error_response(message))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        status_code, message = ERROR_MAP[ErrorKind.STORE]
        return JSONResponse(status_code=status_code, content=error_response(message))
