"""Audit observer that writes authorization decisions to the security log."""

import logging

from boardgate.application.dto.authorization import AuthorizationDecision

security_logger = logging.getLogger("boardgate.security")


class LoggingAuditObserver:
    """Logs denials at WARNING; grants at DEBUG when log_grants is set."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        log_denials: bool = True,
        log_grants: bool = False,
    ) -> None:
        self._logger = logger or security_logger
        self._log_denials = log_denials
        self._log_grants = log_grants

    def on_decision(self, decision: AuthorizationDecision) -> None:
        """Record one decision."""
        extra = {
            "event": f"{decision.resource_kind}_permission_{'granted' if decision.allowed else 'denied'}",
            "user_id": decision.user_id,
            "resource_kind": decision.resource_kind,
            "resource_id": str(decision.resource_id),
            "action": str(decision.action),
            "user_role": decision.role,
            "role_source": decision.source,
        }
        if decision.allowed:
            if self._log_grants:
                self._logger.debug(
                    "%s granted %s on %s %s",
                    decision.user_id, decision.action,
                    decision.resource_kind, decision.resource_id,
                    extra=extra,
                )
            return
        if self._log_denials:
            self._logger.warning(
                "%s denied %s on %s %s (role=%s, source=%s)",
                decision.user_id, decision.action,
                decision.resource_kind, decision.resource_id,
                decision.role, decision.source,
                extra=extra,
            )
