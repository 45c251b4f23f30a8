"""Domain value objects."""

from carescope.domain.value_objects.facility_scope import FacilityScope
from carescope.domain.value_objects.permission import ALL_PERMISSIONS, Permission
from carescope.domain.value_objects.role import ROLE_METADATA, Role

__all__ = [
    "ALL_PERMISSIONS",
    "FacilityScope",
    "Permission",
    "ROLE_METADATA",
    "Role",
]
