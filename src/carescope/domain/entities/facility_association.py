"""Facility association - links a principal to a facility (tenant)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FacilityAssociation:
    """Principal may see data of facility_id."""

    principal_id: int
    facility_id: int
    is_primary: bool = False
