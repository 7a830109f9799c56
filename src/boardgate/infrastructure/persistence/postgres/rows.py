"""Row-to-entity mapping shared by the membership adapters."""

from boardgate.domain.entities import BoardMembership, WorkspaceMembership
from boardgate.domain.value_objects import BoardRole, WorkspaceRole

WORKSPACE_MEMBER_COLUMNS = "user_id, workspace_id, role, joined_at"
BOARD_MEMBER_COLUMNS = "user_id, board_id, role, joined_at"


def workspace_membership_from_row(r: tuple) -> WorkspaceMembership:
    # Unknown role strings are kept raw so decisions fail closed on them.
    return WorkspaceMembership(
        user_id=r[0],
        workspace_id=r[1],
        role=WorkspaceRole.parse(r[2]) or r[2],
        joined_at=r[3],
    )


def board_membership_from_row(r: tuple) -> BoardMembership:
    return BoardMembership(
        user_id=r[0],
        board_id=r[1],
        role=BoardRole.parse(r[2]) or r[2],
        joined_at=r[3],
    )
