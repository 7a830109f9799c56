"""Application ports - interfaces for external adapters."""

from boardgate.application.ports.authorization_observer import AuthorizationObserver
from boardgate.application.ports.authorizer import Authorizer
from boardgate.application.ports.membership_store import MembershipStore
from boardgate.application.ports.unit_of_work import (
    MembershipStoreFactory,
    UnitOfWork,
    UnitOfWorkFactory,
)

__all__ = [
    "AuthorizationObserver",
    "Authorizer",
    "MembershipStore",
    "MembershipStoreFactory",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
