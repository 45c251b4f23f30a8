"""Impersonation session - an admin acting as another principal."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ImpersonationSession:
    """Exists only while the admin of session_id acts as impersonated_principal_id."""

    session_id: str
    original_principal_id: int
    impersonated_principal_id: int
    started_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at
