"""Domain error codes for the accounts module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    FEDERATED_AUTH_FAILED = "FEDERATED_AUTH_FAILED"
    NO_ACTIVE_SESSION = "NO_ACTIVE_SESSION"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class CredentialError(DomainError):
    """Raised when the auth provider rejects an email/password pair.

    The message comes from the provider and is shown to the user as is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message=message)


class FederatedAuthError(DomainError):
    """Raised when the federated sign-in flow fails or is abandoned."""

    def __init__(self, reason: str = "Federated sign-in failed") -> None:
        super().__init__(
            code=ErrorCode.FEDERATED_AUTH_FAILED,
            message="Federated sign-in failed",
        )
        self.reason = reason


class NoActiveSessionError(DomainError):
    """Raised when an operation needs an identity and none is signed in."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.NO_ACTIVE_SESSION,
            message=f"{operation} requires an active session",
        )
        self.operation = operation


class StorageUnavailableError(DomainError):
    """Raised by key-value backends that cannot be read or written."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_UNAVAILABLE,
            message="Local storage is unavailable",
        )
        self.detail = detail
