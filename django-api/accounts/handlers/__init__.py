from accounts.handlers.base import (
    RoleNotPermitted,
    SessionAPIView,
    SessionLoading,
    SignInRequired,
)
from accounts.handlers.views import (
    AssignRoleView,
    FederatedSignInView,
    SessionView,
    SignInView,
    SignOutView,
    SignUpView,
)

__all__ = [
    "AssignRoleView",
    "FederatedSignInView",
    "RoleNotPermitted",
    "SessionAPIView",
    "SessionLoading",
    "SessionView",
    "SignInRequired",
    "SignInView",
    "SignOutView",
    "SignUpView",
]
