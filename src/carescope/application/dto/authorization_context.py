"""Authorization context DTO - resolved authority for one request."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from carescope.domain.entities import ImpersonationSession, Principal
from carescope.domain.exceptions import PermissionDenied
from carescope.domain.services.facility_scope_filter import (
    ensure_in_scope,
    facility_tags,
    filter_by_scope,
)
from carescope.domain.value_objects import FacilityScope, Permission

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Decision(StrEnum):
    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class AuthorizationContext:
    """Acting principal with its effective permissions and facility scope.

    Built once per request by the gateway. Every decision reads acting,
    never original, so an impersonating admin gets the target's authority.
    """

    session_id: str
    acting: Principal
    original: Principal
    permissions: frozenset[Permission]
    facility_scope: FacilityScope
    impersonation: ImpersonationSession | None = None

    @property
    def is_impersonating(self) -> bool:
        return self.impersonation is not None

    def can(self, permission: Permission | str) -> bool:
        perm = Permission.parse(permission)
        return perm is not None and perm in self.permissions

    def can_any(self, permissions: Iterable[Permission | str]) -> bool:
        return any(self.can(p) for p in permissions)

    def can_all(self, permissions: Iterable[Permission | str]) -> bool:
        return all(self.can(p) for p in permissions)

    def decide(self, permission: Permission | str) -> Decision:
        if self.can(permission):
            return Decision.ALLOW
        logger.warning(
            "authorization denied: principal=%s role=%s permission=%s impersonated_by=%s",
            self.acting.id,
            self.acting.role,
            permission,
            self.original.id if self.is_impersonating else None,
        )
        return Decision.DENY

    def require(self, permission: Permission | str) -> None:
        """Raise PermissionDenied unless the acting principal holds permission."""
        if self.decide(permission) is Decision.DENY:
            raise PermissionDenied(
                f"Missing permission: {permission}", permission=str(permission)
            )

    def require_facility(self, facility_id: int) -> None:
        """Raise PermissionDenied unless facility_id is inside the facility scope."""
        if self.facility_scope.allows(facility_id):
            return
        logger.warning(
            "authorization denied: principal=%s facility=%s outside scope impersonated_by=%s",
            self.acting.id,
            facility_id,
            self.original.id if self.is_impersonating else None,
        )
        raise PermissionDenied(f"No access to facility {facility_id}")

    def facility_filter(self, facility_id: int | None = None) -> frozenset[int] | None:
        """Facility ids a repository query may be limited to, None for no limit.

        A requested facility must be inside the scope and narrows the
        result to that facility alone.
        """
        if facility_id is not None:
            self.require_facility(facility_id)
            return frozenset({facility_id})
        if self.facility_scope.unrestricted:
            return None
        return self.facility_scope.facility_ids

    def scope(self, records: Iterable[T], facility_id: int | None = None) -> list[T]:
        """Drop records outside the acting principal's facilities.

        Visible records only carry the facility tags inside the scope. With
        facility_id, only records tagged with that facility are kept.
        """
        records = list(records)
        visible = filter_by_scope(self.facility_scope, records)
        if facility_id is not None:
            self.require_facility(facility_id)
            visible = [r for r in visible if facility_id in facility_tags(r)]
        if len(visible) != len(records):
            level = logging.INFO if not visible else logging.DEBUG
            logger.log(
                level,
                "scope filtered: principal=%s records_in=%d records_out=%d",
                self.acting.id,
                len(records),
                len(visible),
            )
        return visible

    def ensure_in_scope(self, record: T, entity: str, key: object) -> T:
        return ensure_in_scope(self.facility_scope, record, entity, key)
