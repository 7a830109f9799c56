"""Permission evaluation - pure role/action decisions for both hierarchies."""

from boardgate.domain.value_objects import BoardRole, ResourceAction, WorkspaceRole

_READ_WRITE = frozenset({ResourceAction.READ, ResourceAction.WRITE})


def _parse_action(action: object) -> ResourceAction | None:
    if isinstance(action, ResourceAction):
        return action
    try:
        return ResourceAction(action)
    except ValueError:
        return None


def evaluate_workspace_permission(
    role: WorkspaceRole | str | None, action: ResourceAction | str
) -> bool:
    """Return True if a workspace role allows the action.

    OWNER may do anything, MEMBER may read and write, VIEWER may only read.
    None, unknown roles and unknown actions are denied.
    """
    parsed_action = _parse_action(action)
    if parsed_action is None:
        return False
    match WorkspaceRole.parse(role):
        case WorkspaceRole.OWNER:
            return True
        case WorkspaceRole.MEMBER:
            return parsed_action in _READ_WRITE
        case WorkspaceRole.VIEWER:
            return parsed_action == ResourceAction.READ
        case _:
            return False


def evaluate_board_permission(
    role: BoardRole | str | None, action: ResourceAction | str
) -> bool:
    """Return True if a board role allows the action.

    ADMIN may do anything, MEMBER may read and write, VIEWER may only read.
    None, unknown roles and unknown actions are denied.
    """
    parsed_action = _parse_action(action)
    if parsed_action is None:
        return False
    match BoardRole.parse(role):
        case BoardRole.ADMIN:
            return True
        case BoardRole.MEMBER:
            return parsed_action in _READ_WRITE
        case BoardRole.VIEWER:
            return parsed_action == ResourceAction.READ
        case _:
            return False


def map_workspace_role_to_board_role(role: WorkspaceRole | str | None) -> BoardRole:
    """Board role implied by a workspace role. Unrecognized input maps to VIEWER."""
    match WorkspaceRole.parse(role):
        case WorkspaceRole.OWNER:
            return BoardRole.ADMIN
        case WorkspaceRole.MEMBER:
            return BoardRole.MEMBER
        case WorkspaceRole.VIEWER:
            return BoardRole.VIEWER
        case _:
            return BoardRole.VIEWER
