"""Where an effective board role came from."""

from enum import StrEnum


class RoleSource(StrEnum):
    """Direct board membership or inheritance from the workspace."""

    BOARD = "board"
    WORKSPACE = "workspace"
