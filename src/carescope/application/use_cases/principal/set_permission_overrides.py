"""Set permission overrides use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from carescope.application.dto.session import SessionIdentity
from carescope.application.ports import AuthorizationGateway
from carescope.domain.entities import AuditAction, AuditEntry, Principal
from carescope.domain.exceptions import NotFound, PermissionDenied, ValidationError
from carescope.domain.value_objects import Permission

logger = logging.getLogger(__name__)


class SetPermissionOverridesUseCase:
    """Replace (or clear) the explicit permission list of a principal."""

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
        principal_id: int,
        permissions: list[str] | None,
    ) -> Principal:
        """Set overrides of principal_id. None restores the role defaults.

        The override list is the complete permission set of the target,
        it is not merged with the role defaults.
        """
        ctx = await self._gateway.require(session, Permission.MANAGE_FACILITY_USERS)

        overrides: frozenset[Permission] | None = None
        if permissions is not None:
            overrides, unknown = Permission.parse_many(permissions)
            if unknown:
                raise ValidationError(f"Unknown permissions: {', '.join(sorted(unknown))}")
            if not ctx.acting.is_super_admin and not overrides <= ctx.permissions:
                missing = sorted(overrides - ctx.permissions)
                raise PermissionDenied(
                    f"Cannot grant permissions you do not hold: {', '.join(missing)}"
                )

        async with self._uow_factory() as uow:
            target = await uow.principals.get_by_id(principal_id)
            if target is None:
                raise NotFound("Principal", principal_id)
            ctx.ensure_in_scope(target, "Principal", principal_id)
            if target.is_super_admin and not ctx.acting.is_super_admin:
                raise PermissionDenied("Cannot modify a super admin")

            await uow.principals.set_permission_overrides(principal_id, overrides)
            await uow.audit_logs.create(
                AuditEntry(
                    id=uuid4(),
                    action=AuditAction.PERMISSIONS_UPDATE,
                    actor_principal_id=ctx.acting.id,
                    original_principal_id=ctx.original.id if ctx.is_impersonating else None,
                    target_principal_id=principal_id,
                    session_id=ctx.session_id,
                    created_at=datetime.now(UTC),
                    details={
                        "permissions": sorted(overrides) if overrides is not None else None,
                    },
                )
            )
            updated = await uow.principals.get_by_id(principal_id)

        logger.info(
            "permission overrides changed: actor=%s target=%s overrides=%s",
            ctx.acting.id,
            principal_id,
            "role defaults" if overrides is None else len(overrides),
        )
        return ctx.ensure_in_scope(updated, "Principal", principal_id)
