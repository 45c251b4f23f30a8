"""Application ports - interfaces for external adapters."""

from carescope.application.ports.authorization_gateway import AuthorizationGateway
from carescope.application.ports.impersonation_context import ImpersonationContext
from carescope.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuthorizationGateway",
    "ImpersonationContext",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
