"""PostgreSQL impersonation session repository implementation."""

from psycopg import AsyncConnection

from carescope.domain.entities import ImpersonationSession


class PostgresImpersonationRepository:
    """Impersonation sessions keyed by session id."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, session_id: str) -> ImpersonationSession | None:
        """Get impersonation for session."""
        cur = await self._conn.execute(
            "SELECT session_id, original_user_id, impersonated_user_id, started_at, expires_at "
            "FROM impersonation_session WHERE session_id = %s",
            (session_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return ImpersonationSession(
            session_id=r[0],
            original_principal_id=r[1],
            impersonated_principal_id=r[2],
            started_at=r[3],
            expires_at=r[4],
        )

    async def put(self, impersonation: ImpersonationSession) -> None:
        """Insert or replace impersonation for its session."""
        await self._conn.execute(
            "INSERT INTO impersonation_session "
            "(session_id, original_user_id, impersonated_user_id, started_at, expires_at) "
            "VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT (session_id) DO UPDATE SET "
            "original_user_id = EXCLUDED.original_user_id, "
            "impersonated_user_id = EXCLUDED.impersonated_user_id, "
            "started_at = EXCLUDED.started_at, "
            "expires_at = EXCLUDED.expires_at",
            (
                impersonation.session_id,
                impersonation.original_principal_id,
                impersonation.impersonated_principal_id,
                impersonation.started_at,
                impersonation.expires_at,
            ),
        )

    async def delete(self, session_id: str) -> bool:
        """Delete impersonation for session. Returns True if a row was removed."""
        cur = await self._conn.execute(
            "DELETE FROM impersonation_session WHERE session_id = %s",
            (session_id,),
        )
        return cur.rowcount > 0
