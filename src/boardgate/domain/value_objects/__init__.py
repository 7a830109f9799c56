"""Domain value objects."""

from boardgate.domain.value_objects.board_role import BoardRole
from boardgate.domain.value_objects.resource_action import ResourceAction
from boardgate.domain.value_objects.role_source import RoleSource
from boardgate.domain.value_objects.workspace_role import WorkspaceRole

__all__ = [
    "BoardRole",
    "ResourceAction",
    "RoleSource",
    "WorkspaceRole",
]
