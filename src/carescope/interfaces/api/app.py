"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from carescope.application.ports import (
    AuthorizationGateway,
    ImpersonationContext,
    UnitOfWorkFactory,
)
from carescope.application.use_cases.audit.list_audit_logs import ListAuditLogsUseCase
from carescope.application.use_cases.principal.set_permission_overrides import (
    SetPermissionOverridesUseCase,
)
from carescope.application.use_cases.records.list_scoped_records import (
    GetScopedRecordUseCase,
    ListScopedRecordsUseCase,
)
from carescope.domain.value_objects import Permission
from carescope.interfaces.api.resources.audit_logs import AuditLogsResource
from carescope.interfaces.api.resources.facility_users import FacilityUserPermissionsResource
from carescope.interfaces.api.resources.health import HealthResource
from carescope.interfaces.api.resources.impersonation import ImpersonationResource
from carescope.interfaces.api.resources.me import MeResource
from carescope.interfaces.api.resources.records import (
    ScopedCollectionResource,
    ScopedItemResource,
)
from carescope.interfaces.api.resources.roles import RolesResource
from carescope.interfaces.api.resources.serializers import (
    invoice_to_dict,
    principal_to_dict,
    shift_template_to_dict,
    shift_to_dict,
    staff_to_dict,
)


def create_app(
    unit_of_work_factory: UnitOfWorkFactory,
    gateway: AuthorizationGateway,
    impersonation_context: ImpersonationContext,
    middleware: list | None = None,
    health_resource: HealthResource | None = None,
) -> App:
    """Create Falcon ASGI app with routes.

    Every facility-scoped route goes through a use case that checks the
    permission first and then filters by facility.
    """
    uow_factory = unit_of_work_factory

    def listing(permission: Permission, loader) -> ListScopedRecordsUseCase:
        return ListScopedRecordsUseCase(uow_factory, gateway, permission, loader)

    def single(permission: Permission, loader, entity: str) -> GetScopedRecordUseCase:
        return GetScopedRecordUseCase(uow_factory, gateway, permission, loader, entity)

    staff = ScopedCollectionResource(
        listing(Permission.VIEW_STAFF, lambda uow, f: uow.staff.list(f)),
        staff_to_dict,
    )
    staff_member = ScopedItemResource(
        single(Permission.VIEW_STAFF, lambda uow, i: uow.staff.get_by_id(i), "Staff"),
        staff_to_dict,
    )
    shifts = ScopedCollectionResource(
        listing(Permission.VIEW_SCHEDULES, lambda uow, f: uow.shifts.list(f)),
        shift_to_dict,
    )
    shift = ScopedItemResource(
        single(Permission.VIEW_SCHEDULES, lambda uow, i: uow.shifts.get_by_id(i), "Shift"),
        shift_to_dict,
    )
    shift_templates = ScopedCollectionResource(
        listing(Permission.VIEW_SCHEDULES, lambda uow, f: uow.shift_templates.list(f)),
        shift_template_to_dict,
    )
    invoices = ScopedCollectionResource(
        listing(Permission.VIEW_BILLING, lambda uow, f: uow.invoices.list(f)),
        invoice_to_dict,
    )
    facility_users = ScopedCollectionResource(
        listing(Permission.MANAGE_FACILITY_USERS, lambda uow, f: uow.principals.list(f)),
        principal_to_dict,
    )
    facility_user_permissions = FacilityUserPermissionsResource(
        SetPermissionOverridesUseCase(uow_factory, gateway)
    )
    audit_logs = AuditLogsResource(ListAuditLogsUseCase(uow_factory, gateway))
    impersonation = ImpersonationResource(impersonation_context, gateway)
    health = health_resource or HealthResource()

    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/health", health)
    app.add_route("/health/ready", health, suffix="ready")
    app.add_route("/api/me", MeResource(gateway))
    app.add_route("/api/roles", RolesResource())
    app.add_route("/api/staff", staff)
    app.add_route("/api/staff/{record_id:int}", staff_member)
    app.add_route("/api/shifts", shifts)
    app.add_route("/api/shifts/{record_id:int}", shift)
    app.add_route("/api/shift-templates", shift_templates)
    app.add_route("/api/invoices", invoices)
    app.add_route("/api/facility-users", facility_users)
    app.add_route(
        "/api/facility-users/{user_id:int}/permissions", facility_user_permissions
    )
    app.add_route("/api/audit-logs", audit_logs)
    app.add_route("/api/admin/impersonate/stop", impersonation, suffix="stop")
    app.add_route("/api/admin/impersonate/status", impersonation, suffix="status")
    app.add_route(
        "/api/admin/impersonate/{target_id:int}", impersonation, suffix="target"
    )
    return app
