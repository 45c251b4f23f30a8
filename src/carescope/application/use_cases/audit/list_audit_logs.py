"""List audit log entries visible to the acting principal."""

import logging

from carescope.application.dto.session import SessionIdentity
from carescope.application.ports import AuthorizationGateway
from carescope.domain.entities import AuditAction, AuditEntry
from carescope.domain.exceptions import ValidationError
from carescope.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class ListAuditLogsUseCase:
    """Newest audit entries, scoped by the facilities of their target principal.

    Super admins see every entry. Anyone else sees entries whose target is
    associated with one of their facilities.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        gateway: AuthorizationGateway,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gateway = gateway

    async def execute(
        self,
        session: SessionIdentity | None,
        action: str | None = None,
        limit: int = 100,
    ) -> list[AuditEntry]:
        ctx = await self._gateway.require(session, Permission.VIEW_AUDIT_LOGS)

        audit_action = None
        if action is not None:
            try:
                audit_action = AuditAction(action)
            except ValueError:
                raise ValidationError(f"Unknown audit action: {action}") from None

        async with self._uow_factory() as uow:
            targets = None
            if not ctx.facility_scope.unrestricted:
                people = ctx.scope(await uow.principals.list(ctx.facility_filter()))
                targets = frozenset(p.id for p in people)
            entries = await uow.audit_logs.list(
                action=audit_action, target_principal_ids=targets, limit=limit
            )

        logger.debug(
            "audit entries listed: principal=%s action=%s returned=%d",
            ctx.acting.id,
            audit_action,
            len(entries),
        )
        return entries
