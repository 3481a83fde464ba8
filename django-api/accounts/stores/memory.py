"""In-memory auth provider.

Follows the hosted provider's rules closely enough for tests and local runs:
emails are unique, passwords need six characters, and federated sign-ins
resolve to identities queued ahead of time.
"""

import secrets
from collections import deque

from accounts.domain import CredentialError, FederatedAuthError, Identity
from accounts.stores.interfaces import AuthProvider, IdentityCallback
from common.subscriptions import ListenerSet, Unsubscribe

MIN_PASSWORD_LENGTH = 6


class InMemoryAuthProvider(AuthProvider):
    def __init__(self) -> None:
        self._accounts: dict[str, tuple[Identity, str]] = {}
        self._current: Identity | None = None
        self._listeners: ListenerSet[Identity | None] = ListenerSet()
        self._federated: deque[Identity] = deque()

    @property
    def current(self) -> Identity | None:
        return self._current

    def queue_federated(self, identity: Identity) -> None:
        """Make the next federated sign-in resolve to ``identity``."""
        self._federated.append(identity)

    async def create_identity(self, email: str, password: str) -> Identity:
        email = email.strip().lower()
        if "@" not in email:
            raise CredentialError("The email address is badly formatted.")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise CredentialError(
                f"Password should be at least {MIN_PASSWORD_LENGTH} characters."
            )
        if email in self._accounts:
            raise CredentialError(
                "The email address is already in use by another account."
            )
        identity = Identity(uid=f"uid-{secrets.token_hex(8)}", email=email)
        self._accounts[email] = (identity, password)
        await self._change(identity)
        return identity

    async def authenticate(self, email: str, password: str) -> Identity:
        account = self._accounts.get(email.strip().lower())
        if account is None or not secrets.compare_digest(account[1], password):
            raise CredentialError("Invalid email or password.")
        await self._change(account[0])
        return account[0]

    async def authenticate_federated(self) -> Identity:
        if not self._federated:
            raise FederatedAuthError("popup closed before completing sign-in")
        identity = self._federated.popleft()
        await self._change(identity)
        return identity

    async def subscribe(self, on_change: IdentityCallback) -> Unsubscribe:
        unsubscribe = self._listeners.add(on_change)
        await on_change(self._current)
        return unsubscribe

    async def sign_out(self) -> None:
        await self._change(None)

    async def _change(self, identity: Identity | None) -> None:
        self._current = identity
        await self._listeners.anotify(identity)
