"""Domain entities."""

from carescope.domain.entities.audit_entry import AuditAction, AuditEntry
from carescope.domain.entities.facility_association import FacilityAssociation
from carescope.domain.entities.impersonation_session import ImpersonationSession
from carescope.domain.entities.invoice import Invoice
from carescope.domain.entities.principal import Principal
from carescope.domain.entities.shift import Shift
from carescope.domain.entities.shift_template import ShiftTemplate
from carescope.domain.entities.staff_member import StaffMember

__all__ = [
    "AuditAction",
    "AuditEntry",
    "FacilityAssociation",
    "ImpersonationSession",
    "Invoice",
    "Principal",
    "Shift",
    "ShiftTemplate",
    "StaffMember",
]
