"""Value objects for the ingestion domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for one telemetry submission.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TelemetryUser:
    """The user a telemetry message is about.

    ``user_id`` is supplied by the caller and is stable across submissions.
    ``display_name`` is None when the caller omits it, and is stored as such
    even if an earlier submission carried one.
    """

    user_id: str
    username: str
    display_name: str | None = None

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("TelemetryUser.user_id must not be empty")
        if not self.username:
            raise ValueError("TelemetryUser.username must not be empty")


@dataclass(frozen=True)
class TelemetryMessage:
    """A single message; the store assigns its id and timestamp."""

    user_id: str
    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("TelemetryMessage.text must not be empty")


@dataclass(frozen=True)
class TelemetryRecord:
    """One validated ingestion: the user snapshot plus the message."""

    user: TelemetryUser
    message: TelemetryMessage

    @classmethod
    def create(
        cls,
        user_id: str,
        username: str,
        message: str,
        display_name: str | None = None,
    ) -> TelemetryRecord:
        """Build a record whose message references the user."""
        return cls(
            user=TelemetryUser(
                user_id=user_id,
                username=username,
                display_name=display_name or None,
            ),
            message=TelemetryMessage(user_id=user_id, text=message),
        )
