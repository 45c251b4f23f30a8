"""Impersonation session repository port - server-side session store."""

from typing import Protocol

from carescope.domain.entities import ImpersonationSession


class ImpersonationRepository(Protocol):
    """Port for impersonation sessions keyed by session id."""

    async def get(self, session_id: str) -> ImpersonationSession | None: ...

    async def put(self, impersonation: ImpersonationSession) -> None: ...

    async def delete(self, session_id: str) -> bool: ...
