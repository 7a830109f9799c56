"""Domain entities."""

from boardgate.domain.entities.board_member_view import BoardMemberView
from boardgate.domain.entities.membership import BoardMembership, WorkspaceMembership

__all__ = [
    "BoardMemberView",
    "BoardMembership",
    "WorkspaceMembership",
]
