"""Exception handlers mapping shared errors to fixed JSON bodies.

Client-visible bodies are deliberately coarse; details go to the logs.
"""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from infrastructure.database.exceptions import PersistenceError
from shared_kernel.auth.exceptions import ForbiddenError, UnauthenticatedError


def _error(status_code: int, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": code})


async def unauthenticated_handler(
    request: Request, exc: UnauthenticatedError
) -> JSONResponse:
    return _error(status.HTTP_401_UNAUTHORIZED, "unauthorized")


async def forbidden_handler(request: Request, exc: ForbiddenError) -> JSONResponse:
    return _error(status.HTTP_403_FORBIDDEN, "forbidden_ip")


async def persistence_error_handler(
    request: Request, exc: PersistenceError
) -> JSONResponse:
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "server_error")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown paths and unsupported methods both answer 404 not_found."""
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return _error(status.HTTP_404_NOT_FOUND, "not_found")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "bad_request")


def register_error_handlers(app: FastAPI) -> None:
    """Install the shared exception handlers on ``app``."""
    app.add_exception_handler(UnauthenticatedError, unauthenticated_handler)
    app.add_exception_handler(ForbiddenError, forbidden_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
