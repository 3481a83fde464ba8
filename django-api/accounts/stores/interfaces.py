"""Store interfaces for the external collaborators of the session layer.

Implementations must be swappable and speak domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from accounts.domain import Identity
from common.subscriptions import Unsubscribe

IdentityCallback = Callable[[Identity | None], Awaitable[None]]


class KeyValueStore(ABC):
    """Durable local key-value storage scoped to one client."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is unset.

        Raises:
            StorageUnavailableError: If the backend cannot be read.
        """
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value.

        Raises:
            StorageUnavailableError: If the backend cannot be written.
        """
        ...


class AuthProvider(ABC):
    """Interface for the external authentication provider."""

    @abstractmethod
    async def create_identity(self, email: str, password: str) -> Identity:
        """Create and sign in a new identity.

        Raises:
            CredentialError: If the provider rejects the credentials.
        """
        ...

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> Identity:
        """Sign in an existing identity.

        Raises:
            CredentialError: If the credentials are invalid.
        """
        ...

    @abstractmethod
    async def authenticate_federated(self) -> Identity:
        """Sign in through the third-party flow.

        Raises:
            FederatedAuthError: If the flow is abandoned or fails.
        """
        ...

    @abstractmethod
    async def subscribe(self, on_change: IdentityCallback) -> Unsubscribe:
        """Register for identity changes.

        ``on_change`` is awaited once with the current identity before this
        returns, then again on every sign-in and sign-out.
        """
        ...

    @abstractmethod
    async def sign_out(self) -> None:
        """End the provider session."""
        ...
