"""Board member listing row."""

from dataclasses import dataclass
from datetime import datetime

from boardgate.domain.value_objects import BoardRole, RoleSource, WorkspaceRole


@dataclass
class BoardMemberView:
    """Who has which role on a board, and why.

    For inherited members role is the board-equivalent of inherited_from.
    """

    user_id: str
    role: BoardRole
    source: RoleSource
    joined_at: datetime
    inherited_from: WorkspaceRole | None = None
