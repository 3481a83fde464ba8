"""Domain models for identities, roles and the session they form.

Identities belong to the external auth provider; roles are kept locally.
"""

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    PARTICIPANT = "participant"
    ORGANIZER = "organizer"


class SessionState(Enum):
    UNKNOWN = "unknown"
    ANONYMOUS = "anonymous"
    AUTHENTICATED_NO_ROLE = "authenticated_no_role"
    AUTHENTICATED_WITH_ROLE = "authenticated_with_role"


@dataclass(frozen=True)
class Identity:
    """Authenticated principal as reported by the auth provider."""

    uid: str
    email: str | None = None
    display_name: str | None = None


@dataclass(frozen=True)
class SessionSnapshot:
    """Current identity and role, and whether the first lookup is pending."""

    identity: Identity | None = None
    role: Role | None = None
    loading: bool = True

    @property
    def state(self) -> SessionState:
        if self.loading:
            return SessionState.UNKNOWN
        if self.identity is None:
            return SessionState.ANONYMOUS
        if self.role is None:
            return SessionState.AUTHENTICATED_NO_ROLE
        return SessionState.AUTHENTICATED_WITH_ROLE

    @property
    def uid(self) -> str | None:
        return self.identity.uid if self.identity else None


@dataclass(frozen=True)
class RoleLookup:
    """Outcome of a Role Store read.

    ``error`` is set when the backing store could not be read; ``role`` is
    then ``None`` and the caller picks the fallback.
    """

    role: Role | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
