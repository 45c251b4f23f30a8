"""Authorization gateway port - the single enforcement point for data access."""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from carescope.application.dto.authorization_context import AuthorizationContext, Decision
from carescope.application.dto.session import SessionIdentity
from carescope.domain.value_objects import Permission

T = TypeVar("T")


class AuthorizationGateway(Protocol):
    """Port for per-request authorization decisions and facility scoping."""

    async def context(self, session: SessionIdentity | None) -> AuthorizationContext: ...

    async def authorize(self, session: SessionIdentity | None, permission: Permission | str) -> Decision: ...

    async def require(self, session: SessionIdentity | None, permission: Permission | str) -> AuthorizationContext: ...

    async def scope(self, session: SessionIdentity | None, records: Iterable[T]) -> list[T]: ...
