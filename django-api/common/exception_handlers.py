"""DRF exception handler mapping domain errors to responses.

Failures of operations started by a request end here as user facing text.
"""

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from accounts.domain import CredentialError, FederatedAuthError, NoActiveSessionError
from events.domain import EventNotFoundError, WriteError

logger = structlog.get_logger(__name__)


def domain_exception_handler(exc, context):
    view = context.get("view").__class__.__name__ if context.get("view") else None

    if isinstance(exc, CredentialError):
        logger.info("auth.credentials_rejected", view=view, reason=exc.message)
        return _error(exc.message, exc.code.value, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, FederatedAuthError):
        logger.warning("auth.federated_failed", view=view, reason=exc.reason)
        return _error(
            "Federated sign-in failed.", exc.code.value, status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, NoActiveSessionError):
        logger.error("session.contract_violation", view=view, operation=exc.operation)
        return _error(exc.message, exc.code.value, status.HTTP_409_CONFLICT)

    if isinstance(exc, EventNotFoundError):
        return _error(exc.message, exc.code.value, status.HTTP_404_NOT_FOUND)

    if isinstance(exc, WriteError):
        logger.error(
            "document_store.write_rejected",
            view=view,
            collection=exc.collection,
            detail=exc.detail,
        )
        return _error(exc.message, exc.code.value, status.HTTP_502_BAD_GATEWAY)

    return exception_handler(exc, context)


def _error(message: str, code: str, status_code: int) -> Response:
    return Response({"detail": message, "code": code}, status=status_code)
