"""Domain exceptions."""

from uuid import UUID


class BoardGateError(Exception):
    """Base exception for BoardGate."""

    pass


class PermissionDenied(BoardGateError):
    """User may not perform the requested action on the resource.

    The message names only the action and the kind of resource; the
    caller's role is never included.
    """

    def __init__(
        self,
        action: str,
        resource_kind: str,
        resource_id: UUID | str | None = None,
        message: str | None = None,
    ) -> None:
        self.action = str(action)
        self.resource_kind = resource_kind
        self.resource_id = resource_id
        super().__init__(message or f"Not allowed to {self.action} this {resource_kind}")


class InvalidRole(PermissionDenied):
    """An unrecognized role value reached a decision. Always a denial."""

    pass


class ResourceNotFound(BoardGateError):
    """Referenced workspace, board, list or card does not exist."""

    def __init__(self, resource_kind: str, resource_id: UUID | str) -> None:
        self.resource_kind = resource_kind
        self.resource_id = resource_id
        super().__init__(f"{resource_kind} not found: {resource_id}")


class MembershipConflict(BoardGateError):
    """Membership already exists, or the target is not eligible for it."""

    pass


class ValidationError(BoardGateError):
    """Validation failed for input data."""

    pass
