"""django.contrib.auth implementation of the AuthProvider.

One provider is bound to one HTTP request: signing in or out updates that
request's session. Accounts are keyed by email (stored as the username).
"""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from asgiref.sync import sync_to_async
from django.contrib.auth import (
    aauthenticate,
    alogin,
    alogout,
    get_user_model,
    password_validation,
)
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import IntegrityError
from django.http import HttpRequest

from accounts.domain import CredentialError, FederatedAuthError, Identity
from accounts.stores.interfaces import AuthProvider, IdentityCallback
from common.subscriptions import ListenerSet, Unsubscribe

logger = structlog.get_logger(__name__)

MODEL_BACKEND = "django.contrib.auth.backends.ModelBackend"

# Resolves the federated popup result carried by the request into claims
# with at least an "email" key.
FederatedVerifier = Callable[[HttpRequest], Awaitable[dict[str, Any]]]


def identity_from_user(user: Any) -> Identity:
    return Identity(
        uid=str(user.pk),
        email=user.email or None,
        display_name=user.get_full_name() or None,
    )


class DjangoAuthProvider(AuthProvider):
    def __init__(
        self,
        request: HttpRequest,
        federated_verifier: FederatedVerifier | None = None,
    ) -> None:
        self._request = request
        self._federated_verifier = federated_verifier
        self._listeners: ListenerSet[Identity | None] = ListenerSet()

    async def create_identity(self, email: str, password: str) -> Identity:
        email = email.strip().lower()
        try:
            validate_email(email)
        except ValidationError as exc:
            raise CredentialError("Enter a valid email address.") from exc

        user_model = get_user_model()
        if await user_model.objects.filter(username__iexact=email).aexists():
            raise CredentialError("An account with this email already exists.")

        try:
            await sync_to_async(password_validation.validate_password)(
                password, user_model(username=email, email=email)
            )
        except ValidationError as exc:
            raise CredentialError(" ".join(exc.messages)) from exc

        try:
            user = await sync_to_async(user_model.objects.create_user)(
                username=email, email=email, password=password
            )
        except IntegrityError as exc:
            raise CredentialError("An account with this email already exists.") from exc

        logger.info("auth.identity_created", uid=user.pk)
        return await self._sign_in(user)

    async def authenticate(self, email: str, password: str) -> Identity:
        user = await aauthenticate(
            self._request, username=email.strip().lower(), password=password
        )
        if user is None:
            raise CredentialError("Invalid email or password.")
        return await self._sign_in(user)

    async def authenticate_federated(self) -> Identity:
        if self._federated_verifier is None:
            raise FederatedAuthError("no federated verifier configured")
        try:
            claims = await self._federated_verifier(self._request)
        except FederatedAuthError:
            raise
        except Exception as exc:
            raise FederatedAuthError(str(exc)) from exc

        email = (claims.get("email") or "").strip().lower()
        if not email:
            raise FederatedAuthError("federated claims carry no email")

        user, created = await get_user_model().objects.aget_or_create(
            username=email,
            defaults={"email": email, "first_name": claims.get("name", "")},
        )
        if created:
            user.set_unusable_password()
            await user.asave(update_fields=["password"])
            logger.info("auth.federated_identity_created", uid=user.pk)
        return await self._sign_in(user)

    async def subscribe(self, on_change: IdentityCallback) -> Unsubscribe:
        unsubscribe = self._listeners.add(on_change)
        user = await self._request.auser()
        await on_change(identity_from_user(user) if user.is_authenticated else None)
        return unsubscribe

    async def sign_out(self) -> None:
        await alogout(self._request)
        await self._listeners.anotify(None)

    async def _sign_in(self, user: Any) -> Identity:
        await alogin(self._request, user, backend=MODEL_BACKEND)
        identity = identity_from_user(user)
        await self._listeners.anotify(identity)
        return identity
