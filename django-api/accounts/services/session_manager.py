"""Session manager - tracks who is signed in and which role they hold.

The manager is an explicit object built per client (or per request in the
HTTP layer) and handed to whatever needs identity or role. It owns no
global state.

State machine:
    UNKNOWN -> ANONYMOUS | AUTHENTICATED_NO_ROLE | AUTHENTICATED_WITH_ROLE
    AUTHENTICATED_NO_ROLE -> AUTHENTICATED_WITH_ROLE  (assign_role, federated)
    any -> ANONYMOUS  (sign_out)
"""

from collections.abc import Callable

import structlog

from accounts.domain import Identity, NoActiveSessionError, Role, SessionSnapshot
from accounts.services.role_store import RoleStore
from accounts.stores.interfaces import AuthProvider
from common.subscriptions import ListenerSet, Unsubscribe

logger = structlog.get_logger(__name__)


class SessionManager:
    """Current identity, its role, and the operations that change them."""

    def __init__(self, auth_provider: AuthProvider, role_store: RoleStore) -> None:
        self._auth = auth_provider
        self._roles = role_store
        self._snapshot = SessionSnapshot()
        self._listeners: ListenerSet[SessionSnapshot] = ListenerSet()

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def identity(self) -> Identity | None:
        return self._snapshot.identity

    @property
    def role(self) -> Role | None:
        return self._snapshot.role

    @property
    def loading(self) -> bool:
        return self._snapshot.loading

    def add_listener(self, callback: Callable[[SessionSnapshot], None]) -> Unsubscribe:
        return self._listeners.add(callback)

    async def restore_session(self) -> Unsubscribe:
        """Follow the provider's identity stream until unsubscribed."""
        return await self._auth.subscribe(self._on_identity_change)

    async def sign_up(self, email: str, password: str, role: Role) -> Identity:
        """Create an identity and record its role.

        Raises:
            CredentialError: If the provider rejects the credentials.
        """
        identity = await self._auth.create_identity(email, password)
        await self._persist_role(identity, role)
        return identity

    async def sign_in_password(self, email: str, password: str) -> Identity:
        """Sign in with email and password.

        Raises:
            CredentialError: If the credentials are invalid.
        """
        return await self._auth.authenticate(email, password)

    async def sign_in_federated(self, pending_role: Role | None = None) -> Role | None:
        """Sign in through the federated flow and resolve a role.

        A role already stored for the identity wins over ``pending_role``.
        Returns None when neither exists; the caller then asks the user to
        pick one and calls ``assign_role``.

        Raises:
            FederatedAuthError: If the flow fails.
        """
        identity = await self._auth.authenticate_federated()
        existing = await self._roles.get(identity.uid)
        if existing is not None:
            self._update(identity, existing)
            return existing
        if pending_role is not None:
            await self._persist_role(identity, pending_role)
            return pending_role
        return None

    async def assign_role(self, role: Role) -> None:
        """Record ``role`` for the signed-in identity.

        Raises:
            NoActiveSessionError: If nobody is signed in.
        """
        identity = self._snapshot.identity
        if identity is None:
            raise NoActiveSessionError("assign_role")
        await self._persist_role(identity, role)

    async def sign_out(self) -> None:
        await self._auth.sign_out()
        # Providers that do not echo sign-outs still leave us anonymous.
        if self._snapshot.identity is not None:
            self._update(None, None)

    async def _on_identity_change(self, identity: Identity | None) -> None:
        role = None
        if identity is not None:
            lookup = await self._roles.lookup(identity.uid)
            role = lookup.role
        self._update(identity, role)

    async def _persist_role(self, identity: Identity, role: Role) -> None:
        await self._roles.set(identity.uid, role)
        self._update(identity, role)

    def _update(self, identity: Identity | None, role: Role | None) -> None:
        previous = self._snapshot
        self._snapshot = SessionSnapshot(identity=identity, role=role, loading=False)
        if previous.state != self._snapshot.state or previous.identity != identity:
            logger.info(
                "session.transition",
                from_state=previous.state.value,
                to_state=self._snapshot.state.value,
                uid=self._snapshot.uid,
            )
        self._listeners.notify(self._snapshot)
