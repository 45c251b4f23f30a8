"""Facility scope - the set of facilities a principal may see."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FacilityScope:
    """Visible facilities. Unrestricted scope ignores facility_ids."""

    facility_ids: frozenset[int] = frozenset()
    unrestricted: bool = False

    UNRESTRICTED: ClassVar["FacilityScope"]

    @classmethod
    def of(cls, facility_ids: Iterable[int]) -> "FacilityScope":
        return cls(facility_ids=frozenset(facility_ids))

    def allows(self, facility_id: int | None) -> bool:
        if self.unrestricted:
            return True
        return facility_id is not None and facility_id in self.facility_ids

    def intersects(self, tags: Iterable[int]) -> bool:
        """True if at least one tag is visible."""
        if self.unrestricted:
            return True
        return not self.facility_ids.isdisjoint(tags)

    @property
    def is_empty(self) -> bool:
        return not self.unrestricted and not self.facility_ids

    def to_dict(self) -> dict:
        if self.unrestricted:
            return {"unrestricted": True, "facility_ids": None}
        return {"unrestricted": False, "facility_ids": sorted(self.facility_ids)}


FacilityScope.UNRESTRICTED = FacilityScope(unrestricted=True)
