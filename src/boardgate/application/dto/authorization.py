"""Authorization decision DTOs."""

from dataclasses import dataclass
from uuid import UUID

from boardgate.domain.resolution import DirectRole, InheritedRole, ResolvedRole
from boardgate.domain.value_objects import BoardRole, ResourceAction, WorkspaceRole


@dataclass(frozen=True)
class WorkspaceDecision:
    """Result of a workspace permission check."""

    allowed: bool
    role: WorkspaceRole | str | None = None


@dataclass(frozen=True)
class BoardDecision:
    """Result of a board permission check.

    resolved is None only when the board does not exist.
    """

    allowed: bool
    resolved: ResolvedRole | None = None

    @property
    def role(self) -> BoardRole | WorkspaceRole | str | None:
        return self.resolved.role if self.resolved is not None else None

    @property
    def display_role(self) -> BoardRole | None:
        """Board-equivalent role: direct role as-is, inherited role mapped."""
        if isinstance(self.resolved, DirectRole | InheritedRole):
            return self.resolved.board_role
        return None


@dataclass(frozen=True)
class AuthorizationDecision:
    """Decision record handed to observers after the gate decides."""

    user_id: str
    resource_kind: str
    resource_id: UUID
    action: ResourceAction | str
    allowed: bool
    role: str | None = None
    source: str | None = None
