"""Resolved board role - no relationship, direct grant, or inherited grant."""

from dataclasses import dataclass
from typing import ClassVar

from boardgate.domain.permissions import map_workspace_role_to_board_role
from boardgate.domain.value_objects import BoardRole, RoleSource, WorkspaceRole


@dataclass(frozen=True)
class NoRelationship:
    """User has neither a board row nor a workspace role for the board's workspace.

    source is WORKSPACE: inheritance was the only remaining path and it failed.
    """

    role: ClassVar[None] = None
    source: ClassVar[RoleSource] = RoleSource.WORKSPACE
    board_role: ClassVar[None] = None


@dataclass(frozen=True)
class DirectRole:
    """Role from a direct board membership row."""

    role: BoardRole | str
    source: ClassVar[RoleSource] = RoleSource.BOARD

    @property
    def board_role(self) -> BoardRole | None:
        return BoardRole.parse(self.role)


@dataclass(frozen=True)
class InheritedRole:
    """Raw workspace role flowing down into a board with no direct row."""

    role: WorkspaceRole | str
    source: ClassVar[RoleSource] = RoleSource.WORKSPACE

    @property
    def board_role(self) -> BoardRole:
        """Board-equivalent of the inherited workspace role."""
        return map_workspace_role_to_board_role(self.role)


ResolvedRole = NoRelationship | DirectRole | InheritedRole
