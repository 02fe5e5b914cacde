"""Error Handlers - global exception handlers for the enrollment API.

Invariants:
    - EnrollmentError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 with field-level error details
    - Exception (catch-all) and 500-level EnrollmentError -> 500 INTERNAL_ERROR,
      internal detail only in development

Design Decisions:
    - Three-layer handler: domain (EnrollmentError), validation (Pydantic), catch-all (Exception)
    - Shared by the API app and the seed app so both answer with the same envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.config import get_settings
from app.core.errors import EnrollmentError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(EnrollmentError)
    async def enrollment_error_handler(request: Request, exc: EnrollmentError):
        """Handle all enrollment domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "student_id": getattr(request.state, "subject_id", None),
        }
        if exc.http_status >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", extra=extra)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=_build_internal_error_response(exc),
            )
        logger.info(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details outside development."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_build_internal_error_response(exc),
        )


def _build_internal_error_response(exc: Exception) -> dict:
    """Generic Internal envelope shared by storage failures and unhandled errors."""
    body = {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "Internal server error",
            "category": "internal",
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
    if get_settings().is_development:
        body["error"]["detail"] = str(exc)
    return body


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
