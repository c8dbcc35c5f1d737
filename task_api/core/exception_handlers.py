"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Validation failures of either kind (rule
violations and unparseable bodies) share the {"fieldErrors": {...}} shape.
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_api.core.config import get_settings
from task_api.domain.exceptions import TaskApiException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "PERSISTENCE_ERROR": 500,
}

_INTERNAL_ERROR_BODY = {"error": "INTERNAL_ERROR", "message": "Internal server error"}


def _task_api_exception_handler(request: Request, exc: TaskApiException) -> JSONResponse:
    """Return JSON from TaskApiException.to_dict() with appropriate status code.

    500 errors are logged with traceback and answered with a generic body.
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status == 500:
        logger.error(
            "Request failed: %s %s (%s)",
            request.method,
            request.url.path,
            exc.error_code,
            exc_info=exc,
        )
        return JSONResponse(status_code=status, content=dict(_INTERNAL_ERROR_BODY))
    return JSONResponse(status_code=status, content=exc.to_dict())


def _field_name(loc: Sequence[Any]) -> str:
    """Return the JSON field for an error location, e.g. ("body", "dueDateTime") -> "dueDateTime"."""
    if len(loc) >= 2 and loc[0] == "body" and isinstance(loc[1], str):
        return loc[1]
    return "body"


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with the first parser message for each offending field."""
    field_errors: dict[str, str] = {}
    for error in exc.errors():
        field_errors.setdefault(_field_name(error.get("loc", ())), error.get("msg", "Invalid value"))
    logger.debug("Request body rejected by parser: %s", field_errors)
    return JSONResponse(status_code=400, content={"fieldErrors": field_errors})


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskApiException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(TaskApiException, _task_api_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
