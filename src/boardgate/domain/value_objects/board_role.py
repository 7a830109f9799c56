"""Board roles."""

from enum import StrEnum


class BoardRole(StrEnum):
    """Role of a user on a single board."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"

    @classmethod
    def parse(cls, value: object) -> "BoardRole | None":
        """Return the matching role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None
