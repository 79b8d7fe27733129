"""Domain exceptions for the ingestion bounded context."""

REQUIRED_FIELDS: tuple[str, ...] = ("userId", "username", "message")


class InvalidTelemetryError(Exception):
    """Raised when a submission lacks one or more required fields.

    Attributes:
        missing: Wire names of the fields that were absent or empty.
        required: Wire names of every required field.
    """

    def __init__(self, missing: list[str] | None = None):
        self.missing = list(missing or [])
        self.required = list(REQUIRED_FIELDS)
        super().__init__(f"Missing required fields: {', '.join(self.missing) or '?'}")


class PayloadTooLargeError(Exception):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Request body of {size} bytes exceeds limit of {limit}")
