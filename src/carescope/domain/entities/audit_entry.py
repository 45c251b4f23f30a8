"""Audit entry - durable record of an authorization-relevant action."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class AuditAction(StrEnum):
    IMPERSONATION_START = "impersonation.start"
    IMPERSONATION_END = "impersonation.end"
    IMPERSONATION_EXPIRED = "impersonation.expired"
    PERMISSIONS_UPDATE = "permissions.update"


@dataclass
class AuditEntry:
    """Who did what, and on whose behalf when impersonating."""

    id: UUID
    action: AuditAction
    actor_principal_id: int
    session_id: str
    created_at: datetime
    original_principal_id: int | None = None
    target_principal_id: int | None = None
    details: dict = field(default_factory=dict)
