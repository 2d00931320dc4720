"""Centralized translation of errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from contact_api.core.errors import ContactApiError, TokenError

UNKNOWN_ERROR_DESCRIPTION = "Unknown internal server error."


def request_id_of(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


async def contact_api_error_handler(request: Request, exc: ContactApiError) -> JSONResponse:
    if isinstance(exc, TokenError):
        logger.warning("Rejected bearer token: {}", exc.message)
    elif exc.status_code >= 500:
        logger.opt(exception=exc).error("Unhandled application error: {}", exc.message)
    else:
        logger.info("{}: {}", type(exc).__name__, exc.message)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": exc.status_code,
            "detail": exc.message,
            "description": exc.description,
            "request_id": request_id_of(request),
        },
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer 400 with one ``"<field>: <message>"`` entry per violation."""
    messages = [f"{_field_name(err['loc'])}: {err['msg']}" for err in exc.errors()]
    logger.info("Request validation failed: {}", messages)
    return JSONResponse(status_code=400, content=messages)


def internal_error_response(request_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal Server Error",
            "description": UNKNOWN_ERROR_DESCRIPTION,
            "request_id": request_id,
        },
        headers={"X-Request-ID": request_id},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ContactApiError, contact_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
