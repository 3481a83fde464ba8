from accounts.services.access_gate import GateDecision, GateOutcome, decide
from accounts.services.role_store import ROLE_STORAGE_KEY, RoleStore
from accounts.services.session_manager import SessionManager

__all__ = [
    "RoleStore",
    "ROLE_STORAGE_KEY",
    "SessionManager",
    "GateDecision",
    "GateOutcome",
    "decide",
]
