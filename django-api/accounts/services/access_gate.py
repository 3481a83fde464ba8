"""Access gate - decides what a role-restricted view may show.

This is a presentation-level check. The remote store does not enforce who
may write which document; deployments must add server-side rules.
"""

from dataclasses import dataclass
from enum import Enum

from accounts.domain import Role, SessionSnapshot

SIGN_IN_PATH = "/auth"
LANDING_PATH = "/"


class GateOutcome(Enum):
    LOADING = "loading"
    REDIRECT_SIGN_IN = "redirect_sign_in"
    REDIRECT_LANDING = "redirect_landing"
    RENDER = "render"


@dataclass(frozen=True)
class GateDecision:
    outcome: GateOutcome
    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is GateOutcome.RENDER


def decide(
    snapshot: SessionSnapshot, required_role: Role | None = None
) -> GateDecision:
    if snapshot.loading:
        return GateDecision(GateOutcome.LOADING)
    if snapshot.identity is None:
        return GateDecision(GateOutcome.REDIRECT_SIGN_IN, redirect_to=SIGN_IN_PATH)
    if required_role is not None and snapshot.role != required_role:
        return GateDecision(GateOutcome.REDIRECT_LANDING, redirect_to=LANDING_PATH)
    return GateDecision(GateOutcome.RENDER)
