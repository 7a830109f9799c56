"""Actions that can be authorized on workspaces and boards."""

from enum import StrEnum


class ResourceAction(StrEnum):
    """Abstract action taxonomy shared by both role hierarchies."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
    DELETE = "delete"
