"""Membership entities - a user's role on a workspace or a board."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from boardgate.domain.value_objects import BoardRole, WorkspaceRole


@dataclass
class WorkspaceMembership:
    """Workspace membership row. role may hold an unrecognized raw value."""

    user_id: str
    workspace_id: UUID
    role: WorkspaceRole | str
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class BoardMembership:
    """Direct board membership row. role may hold an unrecognized raw value."""

    user_id: str
    board_id: UUID
    role: BoardRole | str
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))
