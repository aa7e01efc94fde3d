import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.utils.response import error_response

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "This vehicle is already booked for those dates."


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(AppException):
    """Missing or malformed client input."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ConflictError(AppException):
    """The requested dates intersect an existing booking of the same vehicle."""

    def __init__(self, message: str = CONFLICT_MESSAGE):
        super().__init__(message, status_code=400)


class StoreError(AppException):
    """The database rejected or failed an operation."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content=error_response("Invalid request"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
