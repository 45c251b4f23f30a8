"""PostgreSQL audit log repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from carescope.domain.entities import AuditAction, AuditEntry


class PostgresAuditLogRepository:
    """Append-only audit log."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditEntry) -> AuditEntry:
        """Append entry."""
        await self._conn.execute(
            "INSERT INTO audit_log (id, action, actor_user_id, original_user_id, "
            "target_user_id, session_id, created_at, details) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                str(entry.action),
                entry.actor_principal_id,
                entry.original_principal_id,
                entry.target_principal_id,
                entry.session_id,
                entry.created_at,
                Jsonb(entry.details),
            ),
        )
        return entry

    async def list(
        self,
        *,
        action: AuditAction | None = None,
        session_id: str | None = None,
        target_principal_ids: frozenset[int] | None = None,
        limit: int = 100,
    ) -> list[AuditEntry]:
        """Newest entries first, narrowed by whichever filters are given."""
        clauses: list[str] = []
        params: list[object] = []
        if action is not None:
            clauses.append("action = %s")
            params.append(str(action))
        if session_id is not None:
            clauses.append("session_id = %s")
            params.append(session_id)
        if target_principal_ids is not None:
            clauses.append("target_user_id = ANY(%s::int[])")
            params.append(sorted(target_principal_ids))
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(limit)

        cur = await self._conn.execute(
            "SELECT id, action, actor_user_id, original_user_id, target_user_id, "
            f"session_id, created_at, details FROM audit_log{where} "
            "ORDER BY created_at DESC LIMIT %s",
            params,
        )
        rows = await cur.fetchall()
        return [
            AuditEntry(
                id=r[0],
                action=AuditAction(r[1]),
                actor_principal_id=r[2],
                original_principal_id=r[3],
                target_principal_id=r[4],
                session_id=r[5],
                created_at=r[6],
                details=r[7] or {},
            )
            for r in rows
        ]
