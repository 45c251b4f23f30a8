"""Facility scope filter - tenant isolation for facility-tagged records."""

from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass, replace
from typing import TypeVar

from carescope.domain.entities import Principal
from carescope.domain.exceptions import NotFound
from carescope.domain.value_objects import FacilityScope

T = TypeVar("T")

_MULTI_TAG = "facility_ids"
_SINGLE_TAGS = ("facility_id", "primary_facility_id")


def visible_facilities(principal: Principal) -> FacilityScope:
    """Facilities principal may see. Super admins are unrestricted."""
    if principal.is_super_admin:
        return FacilityScope.UNRESTRICTED
    return FacilityScope.of(principal.facility_ids)


def _read(record: object, name: str) -> object:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def facility_tags(record: object) -> frozenset[int]:
    """Facility ids a record is tagged with (empty if untagged)."""
    multi = _read(record, _MULTI_TAG)
    if multi:
        return frozenset(int(f) for f in multi if f is not None)
    for name in _SINGLE_TAGS:
        value = _read(record, name)
        if value is not None:
            return frozenset({int(value)})
    return frozenset()


def _restrict_mapping(scope: FacilityScope, record: Mapping) -> Mapping:
    changes: dict = {}
    multi = record.get(_MULTI_TAG)
    if multi:
        kept = [f for f in multi if f is not None and scope.allows(int(f))]
        if len(kept) != len(multi):
            changes[_MULTI_TAG] = kept
    primary = record.get("primary_facility_id")
    if primary is not None and not scope.allows(int(primary)):
        changes["primary_facility_id"] = None
    return {**record, **changes} if changes else record


def restrict_tags(scope: FacilityScope, record: T) -> T:
    """Copy of record showing only the facility tags inside scope.

    Principals lose the associations outside scope, so a primary facility
    outside scope disappears with them. Records needing no change are
    returned as is.
    """
    if scope.unrestricted:
        return record
    if isinstance(record, Mapping):
        return _restrict_mapping(scope, record)
    if not is_dataclass(record) or isinstance(record, type):
        return record

    names = {f.name for f in fields(record)}
    changes: dict = {}
    if "facility_associations" in names:
        kept = frozenset(
            a for a in record.facility_associations if scope.allows(a.facility_id)
        )
        if kept != record.facility_associations:
            changes["facility_associations"] = kept
    if _MULTI_TAG in names:
        kept = frozenset(record.facility_ids) & scope.facility_ids
        if kept != record.facility_ids:
            changes[_MULTI_TAG] = kept
    if "primary_facility_id" in names:
        primary = record.primary_facility_id
        if primary is not None and not scope.allows(primary):
            changes["primary_facility_id"] = None
    return replace(record, **changes) if changes else record


def filter_by_scope(scope: FacilityScope, records: Iterable[T]) -> list[T]:
    """Keep records with at least one tag inside scope, showing only those tags."""
    if scope.unrestricted:
        return list(records)
    return [
        restrict_tags(scope, r) for r in records if scope.intersects(facility_tags(r))
    ]


def scope_filter(principal: Principal, records: Iterable[T]) -> list[T]:
    """Records principal may see."""
    return filter_by_scope(visible_facilities(principal), records)


def ensure_in_scope(scope: FacilityScope, record: T, entity: str, key: object) -> T:
    """Return record with tags cut to scope, or raise NotFound as if it did not exist."""
    if not scope.unrestricted and not scope.intersects(facility_tags(record)):
        raise NotFound(entity, key)
    return restrict_tags(scope, record)
