"""JSON shapes for API responses."""

from carescope.domain.entities import (
    AuditEntry,
    ImpersonationSession,
    Invoice,
    Principal,
    Shift,
    ShiftTemplate,
    StaffMember,
)
from carescope.domain.services.permission_resolver import resolve_permissions


def principal_to_dict(p: Principal) -> dict:
    return {
        "id": p.id,
        "email": p.email,
        "display_name": p.display_name,
        "role": str(p.role) if p.role else None,
        "permissions": sorted(resolve_permissions(p)),
        "permission_overrides": (
            sorted(p.permission_overrides) if p.permission_overrides is not None else None
        ),
        "facility_ids": sorted(p.facility_ids),
        "primary_facility_id": p.primary_facility_id,
        "is_active": p.is_active,
    }


def impersonation_to_dict(i: ImpersonationSession | None) -> dict | None:
    if i is None:
        return None
    return {
        "original_principal_id": i.original_principal_id,
        "impersonated_principal_id": i.impersonated_principal_id,
        "started_at": i.started_at.isoformat(),
        "expires_at": i.expires_at.isoformat() if i.expires_at else None,
    }


def staff_to_dict(s: StaffMember) -> dict:
    return {
        "id": s.id,
        "first_name": s.first_name,
        "last_name": s.last_name,
        "email": s.email,
        "specialty": s.specialty,
        "employment_type": s.employment_type,
        "facility_ids": sorted(s.facility_ids),
        "is_active": s.is_active,
    }


def shift_to_dict(s: Shift) -> dict:
    return {
        "id": s.id,
        "facility_id": s.facility_id,
        "title": s.title,
        "starts_at": s.starts_at.isoformat(),
        "ends_at": s.ends_at.isoformat(),
        "department": s.department,
        "status": s.status,
        "assigned_staff_id": s.assigned_staff_id,
    }


def shift_template_to_dict(t: ShiftTemplate) -> dict:
    return {
        "id": t.id,
        "facility_id": t.facility_id,
        "name": t.name,
        "department": t.department,
        "start_time": t.start_time,
        "end_time": t.end_time,
        "is_active": t.is_active,
    }


def invoice_to_dict(i: Invoice) -> dict:
    return {
        "id": i.id,
        "facility_id": i.facility_id,
        "number": i.number,
        "amount": str(i.amount),
        "status": i.status,
        "due_date": i.due_date.isoformat() if i.due_date else None,
    }


def audit_entry_to_dict(e: AuditEntry) -> dict:
    return {
        "id": str(e.id),
        "action": str(e.action),
        "actor_principal_id": e.actor_principal_id,
        "original_principal_id": e.original_principal_id,
        "target_principal_id": e.target_principal_id,
        "session_id": e.session_id,
        "created_at": e.created_at.isoformat(),
        "details": e.details,
    }
