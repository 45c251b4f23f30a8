"""Role permission table - default permission set per role.

Shipped with the application and never mutated at runtime. Super admins are
not listed: they resolve to the full catalog.
"""

from collections.abc import Mapping
from types import MappingProxyType

from carescope.domain.value_objects import Permission as P
from carescope.domain.value_objects import Role

_FACILITY_ADMIN = frozenset({
    P.VIEW_SCHEDULES, P.CREATE_SHIFTS, P.EDIT_SHIFTS, P.DELETE_SHIFTS,
    P.ASSIGN_STAFF, P.APPROVE_SHIFT_REQUESTS,
    P.VIEW_STAFF, P.CREATE_STAFF, P.EDIT_STAFF, P.DEACTIVATE_STAFF,
    P.VIEW_STAFF_CREDENTIALS, P.EDIT_STAFF_CREDENTIALS, P.MANAGE_CREDENTIALS,
    P.VIEW_FACILITY_PROFILE, P.EDIT_FACILITY_PROFILE, P.MANAGE_FACILITY_SETTINGS,
    P.VIEW_BILLING, P.MANAGE_BILLING, P.VIEW_RATES, P.EDIT_RATES,
    P.APPROVE_INVOICES, P.APPROVE_PAYROLL,
    P.VIEW_REPORTS, P.VIEW_ANALYTICS, P.EXPORT_DATA,
    P.VIEW_COMPLIANCE, P.MANAGE_COMPLIANCE, P.UPLOAD_DOCUMENTS,
    P.MANAGE_FACILITY_USERS, P.MANAGE_PERMISSIONS, P.VIEW_AUDIT_LOGS,
    P.VIEW_JOB_OPENINGS, P.MANAGE_JOB_OPENINGS,
    P.VIEW_WORKFLOW_AUTOMATION, P.MANAGE_WORKFLOW_AUTOMATION,
    P.VIEW_REFERRAL_SYSTEM, P.MANAGE_REFERRAL_SYSTEM,
    P.VIEW_ATTENDANCE_REPORTS, P.VIEW_OVERTIME_REPORTS,
    P.VIEW_FLOAT_POOL_SAVINGS, P.VIEW_AGENCY_USAGE,
})

_SCHEDULING_COORDINATOR = frozenset({
    P.VIEW_SCHEDULES, P.CREATE_SHIFTS, P.EDIT_SHIFTS, P.ASSIGN_STAFF,
    P.APPROVE_SHIFT_REQUESTS,
    P.VIEW_STAFF, P.VIEW_REPORTS, P.VIEW_ANALYTICS,
})

_HR_MANAGER = frozenset({
    P.VIEW_STAFF, P.CREATE_STAFF, P.EDIT_STAFF, P.DEACTIVATE_STAFF,
    P.VIEW_STAFF_CREDENTIALS, P.EDIT_STAFF_CREDENTIALS, P.MANAGE_CREDENTIALS,
    P.VIEW_COMPLIANCE, P.MANAGE_COMPLIANCE, P.UPLOAD_DOCUMENTS,
    P.VIEW_REPORTS, P.EXPORT_DATA,
    P.VIEW_JOB_OPENINGS, P.MANAGE_JOB_OPENINGS,
    P.VIEW_REFERRAL_SYSTEM, P.MANAGE_REFERRAL_SYSTEM,
    P.VIEW_ATTENDANCE_REPORTS, P.VIEW_OVERTIME_REPORTS,
})

_CORPORATE = frozenset({
    P.VIEW_SCHEDULES, P.CREATE_SHIFTS, P.EDIT_SHIFTS, P.ASSIGN_STAFF,
    P.VIEW_STAFF, P.VIEW_REPORTS, P.VIEW_ANALYTICS,
})

_REGIONAL_DIRECTOR = frozenset({
    P.VIEW_SCHEDULES, P.CREATE_SHIFTS, P.EDIT_SHIFTS, P.ASSIGN_STAFF,
    P.VIEW_STAFF, P.VIEW_FACILITY_PROFILE, P.EDIT_FACILITY_PROFILE,
    P.VIEW_BILLING, P.VIEW_REPORTS, P.VIEW_ANALYTICS, P.EXPORT_DATA,
    P.VIEW_COMPLIANCE, P.MANAGE_COMPLIANCE,
    P.VIEW_REFERRAL_SYSTEM, P.MANAGE_REFERRAL_SYSTEM,
    P.VIEW_ATTENDANCE_REPORTS, P.VIEW_OVERTIME_REPORTS,
    P.VIEW_FLOAT_POOL_SAVINGS, P.VIEW_AGENCY_USAGE,
})

_BILLING = frozenset({
    P.VIEW_BILLING, P.MANAGE_BILLING, P.VIEW_RATES, P.EDIT_RATES,
    P.APPROVE_INVOICES, P.APPROVE_PAYROLL,
    P.VIEW_REPORTS, P.EXPORT_DATA, P.VIEW_ANALYTICS,
})

_SUPERVISOR = frozenset({
    P.VIEW_SCHEDULES, P.ASSIGN_STAFF, P.VIEW_STAFF, P.VIEW_REPORTS,
})

_DIRECTOR_OF_NURSING = frozenset({
    P.VIEW_SCHEDULES, P.CREATE_SHIFTS, P.EDIT_SHIFTS, P.ASSIGN_STAFF,
    P.APPROVE_SHIFT_REQUESTS,
    P.VIEW_STAFF, P.CREATE_STAFF, P.EDIT_STAFF,
    P.VIEW_STAFF_CREDENTIALS, P.EDIT_STAFF_CREDENTIALS, P.MANAGE_CREDENTIALS,
    P.VIEW_REPORTS, P.VIEW_ANALYTICS, P.VIEW_COMPLIANCE, P.MANAGE_COMPLIANCE,
    P.VIEW_REFERRAL_SYSTEM, P.MANAGE_REFERRAL_SYSTEM,
    P.VIEW_ATTENDANCE_REPORTS, P.VIEW_OVERTIME_REPORTS,
    P.VIEW_FLOAT_POOL_SAVINGS,
})

_WORKER = frozenset({P.VIEW_SCHEDULES, P.VIEW_STAFF})

ROLE_PERMISSIONS: Mapping[Role, frozenset[P]] = MappingProxyType({
    Role.FACILITY_ADMIN: _FACILITY_ADMIN,
    Role.SCHEDULING_COORDINATOR: _SCHEDULING_COORDINATOR,
    Role.HR_MANAGER: _HR_MANAGER,
    Role.CORPORATE: _CORPORATE,
    Role.REGIONAL_DIRECTOR: _REGIONAL_DIRECTOR,
    Role.BILLING: _BILLING,
    Role.SUPERVISOR: _SUPERVISOR,
    Role.DIRECTOR_OF_NURSING: _DIRECTOR_OF_NURSING,
    Role.EMPLOYEE: _WORKER,
    Role.CONTRACTOR: _WORKER,
})


def default_permissions(role: Role | None) -> frozenset[P]:
    """Default permissions for role. Unknown roles get nothing."""
    if role is None:
        return frozenset()
    return ROLE_PERMISSIONS.get(role, frozenset())
