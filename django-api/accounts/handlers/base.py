"""Base view that opens a session for every request and applies the gate."""

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import Role
from accounts.services import GateDecision, GateOutcome, SessionManager, decide


class SessionLoading(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Checking authentication."
    default_code = "session_loading"


class SignInRequired(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Sign in to continue."
    default_code = "sign_in_required"


class RoleNotPermitted(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "This page is not available for your role."
    default_code = "role_not_permitted"


def enforce(decision: GateDecision) -> None:
    """Turn a non-render gate decision into the matching API error."""
    if decision.outcome is GateOutcome.LOADING:
        raise SessionLoading()
    if decision.outcome is GateOutcome.REDIRECT_SIGN_IN:
        raise SignInRequired(
            detail={
                "detail": SignInRequired.default_detail,
                "redirect": decision.redirect_to,
            }
        )
    if decision.outcome is GateOutcome.REDIRECT_LANDING:
        raise RoleNotPermitted(
            detail={
                "detail": RoleNotPermitted.default_detail,
                "redirect": decision.redirect_to,
            }
        )


class SessionAPIView(APIView):
    """APIView with a SessionManager restored from the request.

    Set ``requires_session`` to gate the view on a signed-in identity, and
    ``required_role`` to gate it on a role as well. ``app_context`` is
    injected through ``as_view``.
    """

    app_context = None
    requires_session = False
    required_role: Role | None = None

    session: SessionManager

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        self.session = self.app_context.session_manager(request._request)
        self._end_session = async_to_sync(self.session.restore_session)()
        if self.requires_session or self.required_role is not None:
            enforce(decide(self.session.snapshot, self.required_role))

    def finalize_response(
        self, request: Request, response: Response, *args, **kwargs
    ) -> Response:
        end_session = getattr(self, "_end_session", None)
        if end_session is not None:
            end_session()
            self._end_session = None
        return super().finalize_response(request, response, *args, **kwargs)
