"""Permission resolver - effective permission set of a principal.

Resolution order:

1. super admins get the whole catalog, overrides are ignored;
2. a non-None override list replaces the role defaults entirely;
3. otherwise the role defaults apply (nothing for an unknown role).
"""

from collections.abc import Iterable

from carescope.domain.entities import Principal
from carescope.domain.role_permissions import default_permissions
from carescope.domain.value_objects import ALL_PERMISSIONS, Permission


def resolve_permissions(principal: Principal) -> frozenset[Permission]:
    """Effective permission set for principal."""
    if principal.is_super_admin:
        return ALL_PERMISSIONS
    if principal.permission_overrides is not None:
        return frozenset(principal.permission_overrides)
    return default_permissions(principal.role)


def can(principal: Principal, permission: Permission | str) -> bool:
    """True if permission is in the principal's effective set.

    Strings outside the catalog never match.
    """
    perm = Permission.parse(permission)
    if perm is None:
        return False
    return perm in resolve_permissions(principal)


def can_any(principal: Principal, permissions: Iterable[Permission | str]) -> bool:
    effective = resolve_permissions(principal)
    return any(
        (perm := Permission.parse(p)) is not None and perm in effective
        for p in permissions
    )


def can_all(principal: Principal, permissions: Iterable[Permission | str]) -> bool:
    effective = resolve_permissions(principal)
    return all(
        (perm := Permission.parse(p)) is not None and perm in effective
        for p in permissions
    )
