"""Authorization observer port - notified after every gate decision."""

from typing import Protocol

from boardgate.application.dto.authorization import AuthorizationDecision


class AuthorizationObserver(Protocol):
    """Receives decisions for audit. Must not influence the outcome."""

    def on_decision(self, decision: AuthorizationDecision) -> None: ...
