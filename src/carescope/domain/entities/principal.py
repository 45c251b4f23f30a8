"""Principal entity - the authenticated actor."""

from dataclasses import dataclass, field

from carescope.domain.entities.facility_association import FacilityAssociation
from carescope.domain.value_objects import Permission, Role


@dataclass(frozen=True)
class Principal:
    """Principal with role, optional permission overrides and facility associations.

    permission_overrides is None when the role defaults apply. An empty
    frozenset is an explicit override granting nothing.
    role is None when the stored role is not recognized.
    """

    id: int
    subject: str
    role: Role | None
    email: str | None = None
    display_name: str | None = None
    permission_overrides: frozenset[Permission] | None = None
    facility_associations: frozenset[FacilityAssociation] = field(default_factory=frozenset)
    is_active: bool = True

    @property
    def is_super_admin(self) -> bool:
        return self.role is Role.SUPER_ADMIN

    @property
    def facility_ids(self) -> frozenset[int]:
        return frozenset(a.facility_id for a in self.facility_associations)

    @property
    def primary_facility_id(self) -> int | None:
        for assoc in self.facility_associations:
            if assoc.is_primary:
                return assoc.facility_id
        return None
