"""Impersonation context port."""

from typing import Protocol

from carescope.application.dto.session import SessionIdentity
from carescope.domain.entities import ImpersonationSession, Principal


class ImpersonationContext(Protocol):
    """Port resolving which principal acts for a session."""

    async def original_principal(self, session: SessionIdentity | None) -> Principal: ...

    async def acting_principal(self, session: SessionIdentity | None) -> Principal: ...

    async def status(self, session: SessionIdentity | None) -> ImpersonationSession | None: ...

    async def resolve(
        self, session: SessionIdentity | None
    ) -> tuple[Principal, Principal, ImpersonationSession | None]: ...

    async def start(self, session: SessionIdentity | None, target_principal_id: int) -> ImpersonationSession: ...

    async def end(self, session: SessionIdentity | None) -> bool: ...
