"""Exception handlers mapping request errors to API responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tally.domain.error import ValidationError

BAD_REQUEST = {"message": "bad_request"}


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or incomplete bodies get a flat 400 instead of FastAPI's 422."""
    logfire.info(
        "Rejected malformed request",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=BAD_REQUEST)


async def domain_validation_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logfire.info("Rejected invalid request", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
