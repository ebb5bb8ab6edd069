"""FastAPI exception handlers producing ErrorResponse bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_api.errors.exceptions import InvalidInputError, PortfolioError
from portfolio_api.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=message,
        code=code,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def describe_validation_errors(errors) -> str:
    """Collapse pydantic error entries into one readable message, e.g. ``date is required``."""
    messages = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        if err.get("type") == "json_invalid":
            messages.append("request body is not valid JSON")
        elif err.get("type") == "missing":
            messages.append(f"{field} is required")
        elif err.get("type") == "string_too_short":
            messages.append(f"{field} must not be empty")
        else:
            messages.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(messages) or "invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(PortfolioError)
    async def portfolio_error_handler(request: Request, exc: PortfolioError):
        if exc.status_code >= 500:
            logger.error("request_failed", extra={"code": exc.code, "path": request.url.path})
        return _error_response(request, exc.status_code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        err = InvalidInputError(describe_validation_errors(exc.errors()))
        return _error_response(request, err.status_code, err.code, err.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unsupported methods on known paths are reported like unknown paths
        if exc.status_code in (404, 405):
            return _error_response(request, 404, "NOT_FOUND", "route not found")
        return _error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", extra={"path": request.url.path})
        return _error_response(request, 500, "INTERNAL_ERROR", "internal server error")
