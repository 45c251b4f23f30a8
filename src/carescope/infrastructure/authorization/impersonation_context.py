"""Impersonation context - decides which principal acts for a session."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from carescope.application.dto.session import SessionIdentity
from carescope.domain.entities import (
    AuditAction,
    AuditEntry,
    ImpersonationSession,
    Principal,
)
from carescope.domain.exceptions import ImpersonationViolation, NotFound, Unauthenticated

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class SessionImpersonationContext:
    """Two-state machine per session: direct, or impersonating a target.

    The impersonation record lives in the session store (uow.impersonations).
    Writes are upserts keyed by session id, so racing start/end calls
    resolve last-write-wins.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._ttl = ttl
        self._clock = clock

    async def _load_original(self, uow, session: SessionIdentity | None) -> Principal:
        if session is None:
            raise Unauthenticated("Authentication required")
        principal = await uow.principals.get_by_subject(session.subject)
        if principal is None or not principal.is_active:
            raise Unauthenticated("Unknown or inactive principal")
        return principal

    async def original_principal(self, session: SessionIdentity | None) -> Principal:
        """Principal that authenticated the session, ignoring impersonation."""
        async with self._uow_factory() as uow:
            return await self._load_original(uow, session)

    async def acting_principal(self, session: SessionIdentity | None) -> Principal:
        """Target while impersonating, else the original principal."""
        acting, _, _ = await self.resolve(session)
        return acting

    async def status(self, session: SessionIdentity | None) -> ImpersonationSession | None:
        """Active impersonation of session, None when acting directly."""
        _, _, impersonation = await self.resolve(session)
        return impersonation

    async def resolve(
        self, session: SessionIdentity | None
    ) -> tuple[Principal, Principal, ImpersonationSession | None]:
        """Return (acting, original, impersonation) for session."""
        async with self._uow_factory() as uow:
            original = await self._load_original(uow, session)
            impersonation = await uow.impersonations.get(session.session_id)
            if impersonation is None:
                return original, original, None

            if (
                impersonation.original_principal_id != original.id
                or not original.is_super_admin
            ):
                await uow.impersonations.delete(session.session_id)
                logger.warning(
                    "impersonation dropped: session=%s original=%s no longer entitled",
                    session.session_id,
                    original.id,
                )
                return original, original, None

            now = self._clock()
            if impersonation.is_expired(now):
                await uow.impersonations.delete(session.session_id)
                await uow.audit_logs.create(
                    AuditEntry(
                        id=uuid4(),
                        action=AuditAction.IMPERSONATION_EXPIRED,
                        actor_principal_id=original.id,
                        original_principal_id=original.id,
                        target_principal_id=impersonation.impersonated_principal_id,
                        session_id=session.session_id,
                        created_at=now,
                    )
                )
                logger.info(
                    "impersonation expired: session=%s original=%s target=%s",
                    session.session_id,
                    original.id,
                    impersonation.impersonated_principal_id,
                )
                return original, original, None

            target = await uow.principals.get_by_id(impersonation.impersonated_principal_id)
            if target is None or not target.is_active:
                await uow.impersonations.delete(session.session_id)
                await uow.commit()
                logger.warning(
                    "impersonation target gone: session=%s target=%s",
                    session.session_id,
                    impersonation.impersonated_principal_id,
                )
                raise Unauthenticated("Impersonated principal is no longer available")

            return target, original, impersonation

    async def start(
        self, session: SessionIdentity | None, target_principal_id: int
    ) -> ImpersonationSession:
        """Make target_principal_id the acting principal of session."""
        async with self._uow_factory() as uow:
            original = await self._load_original(uow, session)
            if not original.is_super_admin:
                raise ImpersonationViolation("Only super admins may impersonate")

            now = self._clock()
            existing = await uow.impersonations.get(session.session_id)
            if existing is not None and not existing.is_expired(now):
                raise ImpersonationViolation("Already impersonating")

            if target_principal_id == original.id:
                raise ImpersonationViolation("Cannot impersonate yourself")

            target = await uow.principals.get_by_id(target_principal_id)
            if target is None:
                raise NotFound("Principal", target_principal_id)
            if not target.is_active:
                raise ImpersonationViolation("Cannot impersonate an inactive principal")

            impersonation = ImpersonationSession(
                session_id=session.session_id,
                original_principal_id=original.id,
                impersonated_principal_id=target.id,
                started_at=now,
                expires_at=now + self._ttl if self._ttl else None,
            )
            await uow.impersonations.put(impersonation)
            await uow.audit_logs.create(
                AuditEntry(
                    id=uuid4(),
                    action=AuditAction.IMPERSONATION_START,
                    actor_principal_id=original.id,
                    original_principal_id=original.id,
                    target_principal_id=target.id,
                    session_id=session.session_id,
                    created_at=now,
                    details={"target_role": str(target.role) if target.role else None},
                )
            )

        logger.info(
            "impersonation started: session=%s original=%s target=%s",
            session.session_id,
            original.id,
            target.id,
        )
        return impersonation

    async def end(self, session: SessionIdentity | None) -> bool:
        """Revert session to its original principal.

        Returns False when there was nothing active to end. A record that
        already ran out is cleared and audited as expired.
        """
        if session is None:
            raise Unauthenticated("Authentication required")
        async with self._uow_factory() as uow:
            impersonation = await uow.impersonations.get(session.session_id)
            if impersonation is None:
                return False
            now = self._clock()
            expired = impersonation.is_expired(now)
            await uow.impersonations.delete(session.session_id)
            await uow.audit_logs.create(
                AuditEntry(
                    id=uuid4(),
                    action=(
                        AuditAction.IMPERSONATION_EXPIRED
                        if expired
                        else AuditAction.IMPERSONATION_END
                    ),
                    actor_principal_id=impersonation.original_principal_id,
                    original_principal_id=impersonation.original_principal_id,
                    target_principal_id=impersonation.impersonated_principal_id,
                    session_id=session.session_id,
                    created_at=now,
                )
            )

        logger.info(
            "impersonation %s: session=%s original=%s target=%s",
            "expired" if expired else "ended",
            session.session_id,
            impersonation.original_principal_id,
            impersonation.impersonated_principal_id,
        )
        return not expired
