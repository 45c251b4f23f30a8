"""Audit log repository port."""

from typing import Protocol

from carescope.domain.entities import AuditAction, AuditEntry


class AuditLogRepository(Protocol):
    """Port for append-only audit entries."""

    async def create(self, entry: AuditEntry) -> AuditEntry: ...

    async def list(
        self,
        *,
        action: AuditAction | None = None,
        session_id: str | None = None,
        target_principal_ids: frozenset[int] | None = None,
        limit: int = 100,
    ) -> list[AuditEntry]:
        """Newest entries first. None filters match everything."""
        ...
