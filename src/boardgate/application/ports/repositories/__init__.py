"""Repository ports."""

from boardgate.application.ports.repositories.board_member_repository import (
    BoardMemberRepository,
)
from boardgate.application.ports.repositories.workspace_member_repository import (
    WorkspaceMemberRepository,
)

__all__ = [
    "BoardMemberRepository",
    "WorkspaceMemberRepository",
]
