"""HTTP routes for telemetry ingestion."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from infrastructure.auth_dependencies import require_allowed_client, require_api_token
from ingestion.application.services import IngestionService
from ingestion.dependencies import get_ingestion_service, read_ingest_request
from ingestion.presentation.models import (
    ErrorResponse,
    IngestRequest,
    MissingFieldsResponse,
    OkResponse,
)

# The bearer check runs for every route on this router, ahead of any
# endpoint-level dependency.
router = APIRouter(
    tags=["ingestion"],
    dependencies=[Depends(require_api_token)],
)


@router.post(
    "/ingest",
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MissingFieldsResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_403_FORBIDDEN: {"model": ErrorResponse},
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def ingest(
    _: Annotated[None, Depends(require_allowed_client)],
    ingest_request: Annotated[IngestRequest, Depends(read_ingest_request)],
    service: Annotated[IngestionService, Depends(get_ingestion_service)],
) -> OkResponse:
    """Record a telemetry message about a user.

    Upserts the user (last write wins for username and display name) and
    appends the message, in one transaction.

    Check order: bearer token (401), client allowlist (403), body size (413),
    required fields (400). A store failure rolls back and returns 500.
    """
    await service.ingest(ingest_request.to_domain())
    return OkResponse()
