"""Pydantic models for ingestion API requests and responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ingestion.domain.exceptions import REQUIRED_FIELDS, InvalidTelemetryError
from ingestion.domain.value_objects import TelemetryRecord


class IngestRequest(BaseModel):
    """Request body for POST /ingest.

    Required fields are typed optional so that a missing field surfaces as
    None and is reported through ``missing_fields`` rather than as a pydantic
    error. Falsy values (empty string, 0, false, null) count as missing.
    Numeric identifiers are accepted and kept as their string form.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: str | None = Field(
        default=None, alias="userId", description="Caller's stable user identifier"
    )
    username: str | None = Field(default=None, description="Current username")
    message: str | None = Field(default=None, description="Message text")
    display_name: str | None = Field(
        default=None, alias="displayName", description="Optional display name"
    )

    @field_validator("user_id", "username", "message", "display_name", mode="before")
    @classmethod
    def _falsy_to_none(cls, value: Any) -> Any:
        if not value:
            return None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def parse(cls, payload: Any) -> IngestRequest:
        """Validate a decoded JSON body.

        A payload that is not a JSON object is treated as an empty object.

        Raises:
            InvalidTelemetryError: If a required field is missing, empty, or
                not a string.
        """
        if not isinstance(payload, dict):
            payload = {}

        try:
            request = cls.model_validate(payload)
        except ValidationError as e:
            invalid = [str(err["loc"][0]) for err in e.errors() if err["loc"]]
            raise InvalidTelemetryError(missing=invalid) from e

        missing = request.missing_fields()
        if missing:
            raise InvalidTelemetryError(missing=missing)
        return request

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent."""
        values = {
            "userId": self.user_id,
            "username": self.username,
            "message": self.message,
        }
        return [name for name in REQUIRED_FIELDS if values[name] is None]

    def to_domain(self) -> TelemetryRecord:
        """Convert a validated request into a domain record."""
        if self.missing_fields():
            raise InvalidTelemetryError(missing=self.missing_fields())
        assert self.user_id is not None
        assert self.username is not None
        assert self.message is not None
        return TelemetryRecord.create(
            user_id=self.user_id,
            username=self.username,
            message=self.message,
            display_name=self.display_name,
        )


class OkResponse(BaseModel):
    """Response model for a successful operation."""

    ok: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """Response model for a coarse error."""

    error: str = Field(..., description="Machine-readable error code")


class MissingFieldsResponse(BaseModel):
    """Response model for a submission lacking required fields."""

    error: str = Field(default="missing fields")
    required: list[str] = Field(default_factory=lambda: list(REQUIRED_FIELDS))
