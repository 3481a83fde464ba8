"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    WRITE_REJECTED = "WRITE_REJECTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not in the merged view."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class WriteError(DomainError):
    """Raised when the remote store rejects a write (permissions, offline)."""

    def __init__(self, collection: str, detail: str) -> None:
        super().__init__(
            code=ErrorCode.WRITE_REJECTED,
            message="Failed to save. Please try again.",
        )
        self.collection = collection
        self.detail = detail
