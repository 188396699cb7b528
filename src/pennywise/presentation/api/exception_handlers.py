"""Exception handlers that render every failure as one JSON envelope.

Envelope:
    {
        "status": 400,
        "message": "Human-readable error message",
        "details": ["One entry per problem found"],
        "code": "ERROR_CODE"
    }

Usage:
    from pennywise.presentation.api.exception_handlers import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pennywise.domain.shared import ErrorCode
from pennywise.presentation.api.errors import ResultError

logger = logging.getLogger(__name__)


ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_UNCHANGED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OLD_PASSWORD_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.OLD_PASSWORD_WRONG: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_BUDGET: status.HTTP_400_BAD_REQUEST,
    # 401
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    # 403, refresh only
    ErrorCode.SESSION_EXPIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    # 404
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BUDGET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EXPENSE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409
    ErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.CATEGORY_NAME_TAKEN: status.HTTP_409_CONFLICT,
    # 500
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    details: Sequence[str] = (),
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON envelope response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": status_code,
            "message": message,
            "details": list(details),
            "code": code,
        },
        headers=headers,
    )


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def setup_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope handlers to ``app``."""

    @app.exception_handler(ResultError)
    async def result_error_handler(
        request: Request,
        exc: ResultError,
    ) -> JSONResponse:
        """Serialize an ``Err`` returned by a service."""
        err = exc.err
        status_code = ERROR_CODE_TO_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST)

        logger.warning(
            "Request failed on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            err.message,
            err.code.value,
            list(err.details),
        )

        headers = None
        if status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}

        return _create_error_response(
            status_code=status_code,
            message=err.message,
            code=err.code.value,
            details=err.details,
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report every invalid field of a request as a 400."""
        details = [_format_validation_error(error) for error in exc.errors()]
        logger.warning(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            details,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message="Invalid request data.",
            code=ErrorCode.VALIDATION_ERROR.value,
            details=details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,  # noqa: ARG001
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Keep framework errors (unknown route, wrong method) in the same shape."""
        return _create_error_response(
            status_code=exc.status_code,
            message=str(exc.detail),
            code="HTTP_ERROR",
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Log the traceback; the client only learns that something failed."""
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
