"""Authorization gateway - resolves acting principal, permissions and scope per request."""

from collections.abc import Iterable
from typing import TypeVar

from carescope.application.dto.authorization_context import AuthorizationContext, Decision
from carescope.application.dto.session import SessionIdentity
from carescope.application.ports import ImpersonationContext
from carescope.domain.services.facility_scope_filter import visible_facilities
from carescope.domain.services.permission_resolver import resolve_permissions
from carescope.domain.value_objects import Permission

T = TypeVar("T")


class FacilityAuthorizationGateway:
    """Combines impersonation, permission resolution and facility scoping.

    Callers reading facility-scoped data need both a permission check and
    scope(); neither is sufficient alone.
    """

    def __init__(self, impersonation_context: ImpersonationContext) -> None:
        self._impersonation = impersonation_context

    async def context(self, session: SessionIdentity | None) -> AuthorizationContext:
        """Resolve acting principal and its authority for session."""
        acting, original, impersonation = await self._impersonation.resolve(session)
        return AuthorizationContext(
            session_id=session.session_id,
            acting=acting,
            original=original,
            permissions=resolve_permissions(acting),
            facility_scope=visible_facilities(acting),
            impersonation=impersonation,
        )

    async def authorize(
        self, session: SessionIdentity | None, permission: Permission | str
    ) -> Decision:
        ctx = await self.context(session)
        return ctx.decide(permission)

    async def require(
        self, session: SessionIdentity | None, permission: Permission | str
    ) -> AuthorizationContext:
        """Return the context if permission is held, else raise PermissionDenied."""
        ctx = await self.context(session)
        ctx.require(permission)
        return ctx

    async def scope(self, session: SessionIdentity | None, records: Iterable[T]) -> list[T]:
        ctx = await self.context(session)
        return ctx.scope(records)
