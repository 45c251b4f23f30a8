"""PostgreSQL principal repository implementation."""

import logging

from psycopg import AsyncConnection

from carescope.domain.entities import FacilityAssociation, Principal
from carescope.domain.value_objects import Permission, Role

logger = logging.getLogger(__name__)

_COLUMNS = "id, subject, email, display_name, role, permission_overrides, is_active"


class PostgresPrincipalRepository:
    """Principal repository - app_user rows joined with facility_association."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def _associations(self, user_ids: list[int]) -> dict[int, set[FacilityAssociation]]:
        if not user_ids:
            return {}
        cur = await self._conn.execute(
            "SELECT user_id, facility_id, is_primary FROM facility_association "
            "WHERE user_id = ANY(%s)",
            (user_ids,),
        )
        rows = await cur.fetchall()
        by_user: dict[int, set[FacilityAssociation]] = {}
        for r in rows:
            by_user.setdefault(r[0], set()).add(
                FacilityAssociation(principal_id=r[0], facility_id=r[1], is_primary=r[2])
            )
        return by_user

    def _to_principal(self, r: tuple, associations: set[FacilityAssociation]) -> Principal:
        role = Role.parse(r[4])
        if role is None:
            logger.warning("unknown role %r for principal %s, no permissions granted", r[4], r[0])

        overrides = None
        if r[5] is not None:
            overrides, unknown = Permission.parse_many(r[5])
            if unknown:
                logger.warning(
                    "ignoring unknown permissions %s for principal %s", unknown, r[0]
                )

        return Principal(
            id=r[0],
            subject=r[1],
            email=r[2],
            display_name=r[3],
            role=role,
            permission_overrides=overrides,
            facility_associations=frozenset(associations),
            is_active=r[6],
        )

    async def _one(self, where: str, value: object) -> Principal | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE {where} = %s",
            (value,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        assoc = await self._associations([r[0]])
        return self._to_principal(r, assoc.get(r[0], set()))

    async def get_by_id(self, principal_id: int) -> Principal | None:
        """Get principal by id."""
        return await self._one("id", principal_id)

    async def get_by_subject(self, subject: str) -> Principal | None:
        """Get principal by identity provider subject."""
        return await self._one("subject", subject)

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Principal]:
        """Principals ordered by id, only those associated with facility_ids if given."""
        if facility_ids is None:
            cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM app_user ORDER BY id")
        else:
            cur = await self._conn.execute(
                f"SELECT {_COLUMNS} FROM app_user WHERE id IN ("
                "SELECT user_id FROM facility_association "
                "WHERE facility_id = ANY(%s::int[])) ORDER BY id",
                (sorted(facility_ids),),
            )
        rows = await cur.fetchall()
        assoc = await self._associations([r[0] for r in rows])
        return [self._to_principal(r, assoc.get(r[0], set())) for r in rows]

    async def set_permission_overrides(
        self, principal_id: int, overrides: frozenset[Permission] | None
    ) -> None:
        """Replace overrides. NULL means role defaults."""
        value = sorted(str(p) for p in overrides) if overrides is not None else None
        await self._conn.execute(
            "UPDATE app_user SET permission_overrides = %s WHERE id = %s",
            (value, principal_id),
        )
