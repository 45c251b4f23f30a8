"""Permission catalog - closed set of capability identifiers."""

from collections.abc import Iterable
from enum import StrEnum


class Permission(StrEnum):
    """Capabilities gating features and data access."""

    # Scheduling
    VIEW_SCHEDULES = "view_schedules"
    CREATE_SHIFTS = "create_shifts"
    EDIT_SHIFTS = "edit_shifts"
    DELETE_SHIFTS = "delete_shifts"
    ASSIGN_STAFF = "assign_staff"
    APPROVE_SHIFT_REQUESTS = "approve_shift_requests"

    # Staff
    VIEW_STAFF = "view_staff"
    CREATE_STAFF = "create_staff"
    EDIT_STAFF = "edit_staff"
    DEACTIVATE_STAFF = "deactivate_staff"
    VIEW_STAFF_CREDENTIALS = "view_staff_credentials"
    EDIT_STAFF_CREDENTIALS = "edit_staff_credentials"
    MANAGE_CREDENTIALS = "manage_credentials"

    # Facility
    VIEW_FACILITY_PROFILE = "view_facility_profile"
    EDIT_FACILITY_PROFILE = "edit_facility_profile"
    MANAGE_FACILITY_SETTINGS = "manage_facility_settings"

    # Billing & payroll
    VIEW_BILLING = "view_billing"
    MANAGE_BILLING = "manage_billing"
    VIEW_RATES = "view_rates"
    EDIT_RATES = "edit_rates"
    APPROVE_INVOICES = "approve_invoices"
    APPROVE_PAYROLL = "approve_payroll"

    # Reporting
    VIEW_REPORTS = "view_reports"
    VIEW_ANALYTICS = "view_analytics"
    EXPORT_DATA = "export_data"
    VIEW_ATTENDANCE_REPORTS = "view_attendance_reports"
    VIEW_OVERTIME_REPORTS = "view_overtime_reports"
    VIEW_FLOAT_POOL_SAVINGS = "view_float_pool_savings"
    VIEW_AGENCY_USAGE = "view_agency_usage"

    # Compliance
    VIEW_COMPLIANCE = "view_compliance"
    MANAGE_COMPLIANCE = "manage_compliance"
    UPLOAD_DOCUMENTS = "upload_documents"

    # Administration
    MANAGE_FACILITY_USERS = "manage_facility_users"
    MANAGE_PERMISSIONS = "manage_permissions"
    VIEW_AUDIT_LOGS = "view_audit_logs"

    # Recruiting & automation
    VIEW_JOB_OPENINGS = "view_job_openings"
    MANAGE_JOB_OPENINGS = "manage_job_openings"
    VIEW_WORKFLOW_AUTOMATION = "view_workflow_automation"
    MANAGE_WORKFLOW_AUTOMATION = "manage_workflow_automation"
    VIEW_REFERRAL_SYSTEM = "view_referral_system"
    MANAGE_REFERRAL_SYSTEM = "manage_referral_system"

    @classmethod
    def parse(cls, value: object) -> "Permission | None":
        """Return the catalog entry for value, or None if it is not in the catalog."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def parse_many(
        cls, values: Iterable[object]
    ) -> tuple[frozenset["Permission"], list[str]]:
        """Split values into known permissions and unknown strings."""
        known: set[Permission] = set()
        unknown: list[str] = []
        for value in values:
            perm = cls.parse(value)
            if perm is None:
                unknown.append(str(value))
            else:
                known.add(perm)
        return frozenset(known), unknown


ALL_PERMISSIONS: frozenset[Permission] = frozenset(Permission)
