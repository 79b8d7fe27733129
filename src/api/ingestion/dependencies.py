"""FastAPI dependencies for the ingestion bounded context."""

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncConnection

from infrastructure.database.gateway import PersistenceGateway
from infrastructure.dependencies import (
    get_app_settings_dep,
    get_observation_context,
    get_persistence_gateway,
)
from infrastructure.settings import AppSettings
from ingestion.application.observability import DefaultIngestionServiceProbe
from ingestion.application.services import IngestionService
from ingestion.domain.exceptions import PayloadTooLargeError
from ingestion.infrastructure.observability import DefaultTelemetryRepositoryProbe
from ingestion.infrastructure.telemetry_repository import TelemetryRepository
from ingestion.presentation.models import IngestRequest
from shared_kernel.observability_context import ObservationContext


def _is_json(content_type: str | None) -> bool:
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_limited_body(request: Request, limit: int) -> bytes:
    """Read the request body, stopping as soon as it exceeds ``limit`` bytes.

    Raises:
        PayloadTooLargeError: If the declared or received size exceeds the limit.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(size=int(declared), limit=limit)

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise PayloadTooLargeError(size=received, limit=limit)
        chunks.append(chunk)
    return b"".join(chunks)


async def read_ingest_request(
    request: Request,
    settings: Annotated[AppSettings, Depends(get_app_settings_dep)],
) -> IngestRequest:
    """Read, size-check, decode and validate the ingest body.

    Bodies that are not declared as JSON, or that fail to decode, are
    treated as an empty object and so fail field validation.

    Raises:
        PayloadTooLargeError: If the body exceeds ``BODY_LIMIT_BYTES``.
        InvalidTelemetryError: If a required field is missing.
    """
    body = await read_limited_body(request, settings.body_limit_bytes)

    payload: Any = {}
    if body and _is_json(request.headers.get("content-type")):
        try:
            payload = json.loads(body)
        except ValueError:
            payload = {}

    return IngestRequest.parse(payload)


def get_ingestion_service(
    gateway: Annotated[PersistenceGateway, Depends(get_persistence_gateway)],
    context: Annotated[ObservationContext, Depends(get_observation_context)],
    ingest_request: Annotated[IngestRequest, Depends(read_ingest_request)],
) -> IngestionService:
    """Get an IngestionService whose probes carry the request context.

    The context is bound to the submitted user id, so every event emitted
    while persisting this submission names the user it is about.
    """
    if ingest_request.user_id is not None:
        context = context.with_telemetry_user(ingest_request.user_id)
    repository_probe = DefaultTelemetryRepositoryProbe().with_context(context)

    def repository_factory(connection: AsyncConnection) -> TelemetryRepository:
        return TelemetryRepository(connection, probe=repository_probe)

    return IngestionService(
        gateway=gateway,
        repository_factory=repository_factory,
        probe=DefaultIngestionServiceProbe().with_context(context),
    )
