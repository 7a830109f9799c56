"""Workspace roles."""

from enum import StrEnum


class WorkspaceRole(StrEnum):
    """Role of a user within a workspace."""

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"

    @classmethod
    def parse(cls, value: object) -> "WorkspaceRole | None":
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
