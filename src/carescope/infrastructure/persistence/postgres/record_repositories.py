"""PostgreSQL repositories for facility-scoped records.

list() takes the facility ids of the caller's scope and limits the query to
them, None reads every facility. Callers still scope the rows through the
gateway.
"""

from psycopg import AsyncConnection

from carescope.domain.entities import Invoice, Shift, ShiftTemplate, StaffMember


def _facility_clause(facility_ids: frozenset[int] | None) -> tuple[str, tuple]:
    """WHERE clause limiting single-facility rows to facility_ids."""
    if facility_ids is None:
        return "", ()
    return " WHERE facility_id = ANY(%s::int[])", (sorted(facility_ids),)


class PostgresStaffRepository:
    """Staff repository implementation."""

    _SELECT = (
        "SELECT id, first_name, last_name, email, specialty, employment_type, "
        "facility_ids, is_active FROM staff"
    )

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r: tuple) -> StaffMember:
        return StaffMember(
            id=r[0],
            first_name=r[1],
            last_name=r[2],
            email=r[3],
            specialty=r[4],
            employment_type=r[5],
            facility_ids=frozenset(r[6] or ()),
            is_active=r[7],
        )

    async def get_by_id(self, staff_id: int) -> StaffMember | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (staff_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[StaffMember]:
        if facility_ids is None:
            cur = await self._conn.execute(f"{self._SELECT} ORDER BY id")
        else:
            cur = await self._conn.execute(
                f"{self._SELECT} WHERE facility_ids && %s::int[] ORDER BY id",
                (sorted(facility_ids),),
            )
        return [self._row(r) for r in await cur.fetchall()]


class PostgresShiftRepository:
    """Shift repository implementation."""

    _SELECT = (
        "SELECT id, facility_id, title, starts_at, ends_at, department, status, "
        "assigned_staff_id FROM shift"
    )

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r: tuple) -> Shift:
        return Shift(
            id=r[0],
            facility_id=r[1],
            title=r[2],
            starts_at=r[3],
            ends_at=r[4],
            department=r[5],
            status=r[6],
            assigned_staff_id=r[7],
        )

    async def get_by_id(self, shift_id: int) -> Shift | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (shift_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Shift]:
        where, params = _facility_clause(facility_ids)
        cur = await self._conn.execute(
            f"{self._SELECT}{where} ORDER BY starts_at, id", params
        )
        return [self._row(r) for r in await cur.fetchall()]


class PostgresShiftTemplateRepository:
    """Shift template repository implementation."""

    _SELECT = (
        "SELECT id, facility_id, name, department, start_time, end_time, is_active "
        "FROM shift_template"
    )

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r: tuple) -> ShiftTemplate:
        return ShiftTemplate(
            id=r[0],
            facility_id=r[1],
            name=r[2],
            department=r[3],
            start_time=r[4].strftime("%H:%M"),
            end_time=r[5].strftime("%H:%M"),
            is_active=r[6],
        )

    async def get_by_id(self, template_id: int) -> ShiftTemplate | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (template_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[ShiftTemplate]:
        where, params = _facility_clause(facility_ids)
        cur = await self._conn.execute(f"{self._SELECT}{where} ORDER BY id", params)
        return [self._row(r) for r in await cur.fetchall()]


class PostgresInvoiceRepository:
    """Invoice repository implementation."""

    _SELECT = "SELECT id, facility_id, number, amount, status, due_date FROM invoice"

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    @staticmethod
    def _row(r: tuple) -> Invoice:
        return Invoice(
            id=r[0],
            facility_id=r[1],
            number=r[2],
            amount=r[3],
            status=r[4],
            due_date=r[5],
        )

    async def get_by_id(self, invoice_id: int) -> Invoice | None:
        cur = await self._conn.execute(f"{self._SELECT} WHERE id = %s", (invoice_id,))
        r = await cur.fetchone()
        return self._row(r) if r else None

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Invoice]:
        where, params = _facility_clause(facility_ids)
        cur = await self._conn.execute(f"{self._SELECT}{where} ORDER BY id", params)
        return [self._row(r) for r in await cur.fetchall()]
