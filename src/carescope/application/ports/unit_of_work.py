"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from carescope.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from carescope.application.ports.repositories.impersonation_repository import (
    ImpersonationRepository,
)
from carescope.application.ports.repositories.invoice_repository import (
    InvoiceRepository,
)
from carescope.application.ports.repositories.principal_repository import (
    PrincipalRepository,
)
from carescope.application.ports.repositories.shift_repository import ShiftRepository
from carescope.application.ports.repositories.shift_template_repository import (
    ShiftTemplateRepository,
)
from carescope.application.ports.repositories.staff_repository import StaffRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def principals(self) -> PrincipalRepository: ...

    @property
    def impersonations(self) -> ImpersonationRepository: ...

    @property
    def audit_logs(self) -> AuditLogRepository: ...

    @property
    def staff(self) -> StaffRepository: ...

    @property
    def shifts(self) -> ShiftRepository: ...

    @property
    def shift_templates(self) -> ShiftTemplateRepository: ...

    @property
    def invoices(self) -> InvoiceRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
