"""Custom exceptions and error handling"""
from typing import Any, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog


logger = structlog.get_logger(__name__)


class APIError(Exception):
    """Base API error with error envelope"""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


def missing_query() -> APIError:
    return APIError("MISSING_QUERY", "Query is required", status_code=status.HTTP_400_BAD_REQUEST)


def missing_credentials(service: str) -> APIError:
    return APIError(
        "MISSING_CREDENTIALS",
        f"Missing {service} API key",
        status_code=status.HTTP_400_BAD_REQUEST,
        details={"service": service}
    )


def _request_id(request: Request) -> str:
    return request.state.request_id if hasattr(request.state, "request_id") else "unknown"


def create_error_response(
    code: str,
    message: str,
    request_id: str,
    details: Optional[Dict[str, Any]] = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "request_id": request_id,
                "details": details or {}
            }
        },
        headers={"X-Request-Id": request_id}
    )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions"""
    request_id = _request_id(request)

    logger.error(
        "api_error",
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code=exc.code,
        message=exc.message,
        request_id=request_id,
        details=exc.details,
        status_code=exc.status_code
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle Pydantic validation errors"""
    request_id = _request_id(request)
    errors = jsonable_errors(exc)

    logger.warning(
        "validation_error",
        errors=errors,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="VALIDATION_ERROR",
        message="Request validation failed",
        request_id=request_id,
        details={"errors": errors},
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions"""
    request_id = _request_id(request)

    logger.warning(
        "http_exception",
        status_code=exc.status_code,
        detail=exc.detail,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="HTTP_ERROR",
        message=str(exc.detail),
        request_id=request_id,
        status_code=exc.status_code
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions"""
    request_id = _request_id(request)

    logger.error(
        "unhandled_exception",
        exc_info=exc,
        request_id=request_id,
        path=request.url.path
    )

    return create_error_response(
        code="INTERNAL_ERROR",
        message="An internal error occurred",
        request_id=request_id,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may carry the raw exception object, which JSONResponse cannot encode
    errors = []
    for error in exc.errors():
        cleaned = {key: value for key, value in error.items() if key not in ("ctx", "input")}
        errors.append(cleaned)
    return errors


def upstream_failure(exc: Exception, code: str = "UPSTREAM_ERROR") -> APIError:
    """Surface an upstream failure to the caller with its message unchanged."""
    details: Dict[str, Any] = {}
    service = getattr(exc, "service", None)
    if service:
        details["service"] = service
    upstream_status = getattr(exc, "status_code", None)
    if upstream_status is not None:
        details["upstream_status"] = upstream_status
    message = str(exc) or "Error processing your request with the AI model"
    return APIError(code, message, status_code=status.HTTP_502_BAD_GATEWAY, details=details)
