"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from carescope.infrastructure.persistence.postgres.audit_log_repository import (
    PostgresAuditLogRepository,
)
from carescope.infrastructure.persistence.postgres.impersonation_repository import (
    PostgresImpersonationRepository,
)
from carescope.infrastructure.persistence.postgres.principal_repository import (
    PostgresPrincipalRepository,
)
from carescope.infrastructure.persistence.postgres.record_repositories import (
    PostgresInvoiceRepository,
    PostgresShiftRepository,
    PostgresShiftTemplateRepository,
    PostgresStaffRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._principals = PostgresPrincipalRepository(self._conn)
        self._impersonations = PostgresImpersonationRepository(self._conn)
        self._audit_logs = PostgresAuditLogRepository(self._conn)
        self._staff = PostgresStaffRepository(self._conn)
        self._shifts = PostgresShiftRepository(self._conn)
        self._shift_templates = PostgresShiftTemplateRepository(self._conn)
        self._invoices = PostgresInvoiceRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def principals(self) -> PostgresPrincipalRepository:
        return self._principals

    @property
    def impersonations(self) -> PostgresImpersonationRepository:
        return self._impersonations

    @property
    def audit_logs(self) -> PostgresAuditLogRepository:
        return self._audit_logs

    @property
    def staff(self) -> PostgresStaffRepository:
        return self._staff

    @property
    def shifts(self) -> PostgresShiftRepository:
        return self._shifts

    @property
    def shift_templates(self) -> PostgresShiftTemplateRepository:
        return self._shift_templates

    @property
    def invoices(self) -> PostgresInvoiceRepository:
        return self._invoices

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
