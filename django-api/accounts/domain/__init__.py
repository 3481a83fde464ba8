from accounts.domain.errors import (
    CredentialError,
    DomainError,
    ErrorCode,
    FederatedAuthError,
    NoActiveSessionError,
    StorageUnavailableError,
)
from accounts.domain.models import (
    Identity,
    Role,
    RoleLookup,
    SessionSnapshot,
    SessionState,
)

__all__ = [
    "Identity",
    "Role",
    "RoleLookup",
    "SessionSnapshot",
    "SessionState",
    "DomainError",
    "ErrorCode",
    "CredentialError",
    "FederatedAuthError",
    "NoActiveSessionError",
    "StorageUnavailableError",
]
