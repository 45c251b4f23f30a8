"""Repository ports."""

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

__all__ = [
    "AuditLogRepository",
    "ImpersonationRepository",
    "InvoiceRepository",
    "PrincipalRepository",
    "ShiftRepository",
    "ShiftTemplateRepository",
    "StaffRepository",
]
