"""
Error Responder

Tagged API errors and the translator that maps each tag to an HTTP response.

Business-rule failures are built with error_responder() and carried as
ApiError. Anything else that escapes a route is an unclassified fault and is
answered as SERVER (500).
"""
import logging
from enum import Enum
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("userhub.errors")


class ErrorType(Enum):
    """Error tags with their HTTP status, wire code and description."""

    SERVER = (500, "SERVER_ERROR", "Server error occurred")
    NOT_FOUND = (404, "NOT_FOUND_ERROR", "Route not found")
    VALIDATION = (400, "VALIDATION_ERROR", "Invalid request")
    INVALID_PASSWORD = (403, "INVALID_PASSWORD_ERROR", "Invalid password")
    EMAIL_ALREADY_TAKEN = (409, "EMAIL_ALREADY_TAKEN_ERROR", "Email already taken")
    UNPROCESSABLE_ENTITY = (422, "UNPROCESSABLE_ENTITY_ERROR", "Unprocessable entity")

    def __init__(self, status: int, code: str, description: str):
        self.status = status
        self.code = code
        self.description = description


class ApiError(Exception):
    """An error tagged with an ErrorType, ready for translation."""

    def __init__(self, error_type: ErrorType, message: Optional[str] = None):
        self.error_type = error_type
        self.message = message or error_type.description
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error_type.status

    def to_dict(self) -> dict:
        return _error_body(
            self.error_type.status,
            self.error_type.code,
            self.error_type.description,
            self.message,
        )

    def __repr__(self) -> str:
        return f"ApiError({self.error_type.name}, {self.message!r})"


def error_responder(error_type: ErrorType, message: Optional[str] = None) -> ApiError:
    """Build an ApiError for the given tag. The caller decides how to surface it."""
    return ApiError(error_type, message)


def _error_body(status: int, code: str, description: str, message: str) -> dict:
    return {
        "statusCode": status,
        "error": code,
        "description": description,
        "message": message,
    }


def register_error_handlers(app: FastAPI) -> None:
    """Install the error-to-status translator on the app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = ApiError(ErrorType.VALIDATION, "Request could not be decoded")
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            error = ApiError(ErrorType.NOT_FOUND, f"Route {request.url.path} not found")
            return JSONResponse(status_code=404, content=error.to_dict())
        # Fallback for other HTTP errors (405 and friends)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, "HTTP_ERROR", "HTTP error", str(exc.detail)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s", request.url.path)
        error = ApiError(ErrorType.SERVER, str(exc) or ErrorType.SERVER.description)
        return JSONResponse(status_code=500, content=error.to_dict())
