"""HTTP handlers for sign-up, sign-in, role selection and sign-out.

Handlers parse input, call the SessionManager and return the resulting
session. Domain errors are mapped by common.exception_handlers.
"""

from asgiref.sync import async_to_sync
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from accounts.domain import Role
from accounts.handlers.base import SessionAPIView
from accounts.handlers.serializers import (
    AssignRoleSerializer,
    CredentialsSerializer,
    FederatedSignInSerializer,
    SessionSerializer,
    SignUpSerializer,
)


class SessionView(SessionAPIView):
    """Handler for GET /api/auth/session"""

    def get(self, request: Request) -> Response:
        return Response(SessionSerializer(self.session.snapshot).data)


class SignUpView(SessionAPIView):
    """Handler for POST /api/auth/signup"""

    def post(self, request: Request) -> Response:
        serializer = SignUpSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        async_to_sync(self.session.sign_up)(
            data["email"], data["password"], Role(data["role"])
        )
        return Response(
            SessionSerializer(self.session.snapshot).data,
            status=status.HTTP_201_CREATED,
        )


class SignInView(SessionAPIView):
    """Handler for POST /api/auth/signin"""

    def post(self, request: Request) -> Response:
        serializer = CredentialsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        async_to_sync(self.session.sign_in_password)(data["email"], data["password"])
        return Response(SessionSerializer(self.session.snapshot).data)


class FederatedSignInView(SessionAPIView):
    """Handler for POST /api/auth/federated

    ``needs_role`` is true when the identity has no stored role and none
    was supplied; the client should then call /api/auth/role.
    """

    def post(self, request: Request) -> Response:
        serializer = FederatedSignInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        pending = serializer.validated_data.get("role")
        role = async_to_sync(self.session.sign_in_federated)(
            Role(pending) if pending else None
        )
        body = SessionSerializer(self.session.snapshot).data
        body["needs_role"] = role is None
        return Response(body)


class AssignRoleView(SessionAPIView):
    """Handler for POST /api/auth/role"""

    def post(self, request: Request) -> Response:
        serializer = AssignRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        async_to_sync(self.session.assign_role)(Role(serializer.validated_data["role"]))
        return Response(SessionSerializer(self.session.snapshot).data)


class SignOutView(SessionAPIView):
    """Handler for POST /api/auth/signout"""

    def post(self, request: Request) -> Response:
        async_to_sync(self.session.sign_out)()
        return Response(SessionSerializer(self.session.snapshot).data)
