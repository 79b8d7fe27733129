"""Exception handlers mapping ingestion errors to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ingestion.domain.exceptions import InvalidTelemetryError, PayloadTooLargeError
from ingestion.presentation.models import ErrorResponse, MissingFieldsResponse


async def invalid_telemetry_handler(
    request: Request, exc: InvalidTelemetryError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=MissingFieldsResponse(required=exc.required).model_dump(),
    )


async def payload_too_large_handler(
    request: Request, exc: PayloadTooLargeError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        content=ErrorResponse(error="payload_too_large").model_dump(),
    )


def register_ingestion_error_handlers(app: FastAPI) -> None:
    """Install the ingestion context's exception handlers on ``app``."""
    app.add_exception_handler(InvalidTelemetryError, invalid_telemetry_handler)
    app.add_exception_handler(PayloadTooLargeError, payload_too_large_handler)
