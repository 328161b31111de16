"""Exception → JSON response mapping, registered by create_app().

Every error body has the shape ``{"error": code, "message": str, "details": ...}``.
Database errors are not caught below this layer; they end up in the
catch-all 500 handler.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import TaskboardException

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "VALIDATION_ERROR": 400,
    "SQL_NOT_CONFIGURED": 503,
}


def _error(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def _on_taskboard_error(request: Request, exc: TaskboardException) -> JSONResponse:
    status_code = _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    # RFC 6750: 401 responses name the expected scheme.
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def _on_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error(422, "VALIDATION_ERROR", "Request validation failed", exc.errors())


async def _on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, "HTTP_ERROR", exc.detail, headers=exc.headers)


async def _on_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardException, _on_taskboard_error)
    app.add_exception_handler(RequestValidationError, _on_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _on_http_error)
    app.add_exception_handler(Exception, _on_unhandled_error)
