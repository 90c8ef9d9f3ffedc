"""
Exception handlers translating failures into Problem Details responses.

Handlers:
    domain_error_handler: DomainError subclasses (404, 406, 415, 422, ...)
    http_exception_handler: HTTPException raised by dependencies (401, ...)
    validation_exception_handler: RequestValidationError from FastAPI (422)
    unhandled_exception_handler: anything else (500, logged with an error_id)
"""

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.api.errors.problem_details import PROBLEM_MEDIA_TYPE, ErrorDetail, ProblemDetails
from app.application.negotiation import format_versions
from app.config import get_settings
from app.domain.errors import DomainError, PatchRejectedError, ValidationFailedError

logger = logging.getLogger(__name__)

_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    406: ("Not Acceptable", "not-acceptable"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _problem(
    request: Request,
    status_code: int,
    detail: str,
    headers: dict[str, str] | None = None,
    **extra,
) -> JSONResponse:
    title, slug = _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"https://httpstatuses.io/{status_code}#{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        **extra,
    )
    response = JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )
    response.headers["api-supported-versions"] = format_versions(
        get_settings().supported_api_versions
    )
    return response


def _field_errors(pairs: list[tuple[str, str]], code: str) -> list[ErrorDetail]:
    return [ErrorDetail(field=field, code=code, message=message) for field, message in pairs]


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    extra: dict = {"code": exc.code}
    if isinstance(exc, ValidationFailedError):
        extra["errors"] = _field_errors(exc.errors, "invalid")
    if isinstance(exc, PatchRejectedError):
        extra["reason"] = exc.reason
        if exc.errors:
            extra["errors"] = _field_errors(exc.errors, "invalid")
    return _problem(request, exc.status_code, exc.message, **extra)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _problem(
        request,
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error.get("loc", ())) or "request",
            code=str(error.get("type", "invalid")),
            message=str(error.get("msg", "Invalid value")),
        )
        for error in exc.errors()
    ]
    return _problem(
        request,
        422,
        "The request failed validation",
        code="REQUEST_VALIDATION_FAILED",
        errors=errors,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Prevents stack trace exposure to clients.

    The full error is logged with an error_id the client can report back.
    """
    error_id = str(uuid.uuid4())
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )
    return _problem(
        request,
        500,
        "An unexpected error occurred. Please contact support with the error_id "
        "if the issue persists.",
        error_id=error_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
