from django.urls import path

from accounts.handlers import (
    AssignRoleView,
    FederatedSignInView,
    SessionView,
    SignInView,
    SignOutView,
    SignUpView,
)


def auth_urlpatterns(app_context):
    return [
        path(
            "auth/session",
            SessionView.as_view(app_context=app_context),
            name="auth-session",
        ),
        path(
            "auth/signup",
            SignUpView.as_view(app_context=app_context),
            name="auth-signup",
        ),
        path(
            "auth/signin",
            SignInView.as_view(app_context=app_context),
            name="auth-signin",
        ),
        path(
            "auth/federated",
            FederatedSignInView.as_view(app_context=app_context),
            name="auth-federated",
        ),
        path(
            "auth/role",
            AssignRoleView.as_view(app_context=app_context),
            name="auth-role",
        ),
        path(
            "auth/signout",
            SignOutView.as_view(app_context=app_context),
            name="auth-signout",
        ),
    ]
