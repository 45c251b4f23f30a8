"""Principal roles."""

from enum import StrEnum


class Role(StrEnum):
    """Closed set of roles a principal can hold."""

    SUPER_ADMIN = "super_admin"

    FACILITY_ADMIN = "facility_admin"
    SCHEDULING_COORDINATOR = "scheduling_coordinator"
    HR_MANAGER = "hr_manager"
    CORPORATE = "corporate"
    REGIONAL_DIRECTOR = "regional_director"
    BILLING = "billing"
    SUPERVISOR = "supervisor"
    DIRECTOR_OF_NURSING = "director_of_nursing"

    EMPLOYEE = "employee"
    CONTRACTOR = "contractor"

    @classmethod
    def parse(cls, value: object) -> "Role | None":
        """Return the role for value, or None if the value is not a known role."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return ROLE_METADATA[self][0]

    @property
    def description(self) -> str:
        return ROLE_METADATA[self][1]


ROLE_METADATA: dict[Role, tuple[str, str]] = {
    Role.SUPER_ADMIN: (
        "Super Admin",
        "Full system access across every facility, may impersonate users",
    ),
    Role.FACILITY_ADMIN: (
        "Facility Administrator",
        "Complete facility management including staff, billing and compliance",
    ),
    Role.SCHEDULING_COORDINATOR: (
        "Scheduling Coordinator",
        "Manage shifts, schedules and staff assignments",
    ),
    Role.HR_MANAGER: (
        "HR Manager",
        "Manage staff, credentials, compliance and recruitment",
    ),
    Role.CORPORATE: (
        "Corporate",
        "Multi-facility oversight of schedules and staffing",
    ),
    Role.REGIONAL_DIRECTOR: (
        "Regional Director",
        "Regional facility oversight with reporting and compliance",
    ),
    Role.BILLING: (
        "Billing",
        "Invoices, rates and payroll approval",
    ),
    Role.SUPERVISOR: (
        "Supervisor",
        "View schedules and staff, assign staff to shifts",
    ),
    Role.DIRECTOR_OF_NURSING: (
        "Director of Nursing",
        "Clinical oversight with schedule, staff and compliance management",
    ),
    Role.EMPLOYEE: (
        "Employee",
        "Healthcare worker with access to their schedule",
    ),
    Role.CONTRACTOR: (
        "Contractor",
        "Contract healthcare worker with access to their schedule",
    ),
}
