"""Staff member entity - may work at several facilities."""

from dataclasses import dataclass, field


@dataclass
class StaffMember:
    """Staff member tagged with every facility they are associated with."""

    id: int
    first_name: str
    last_name: str
    email: str | None = None
    specialty: str | None = None
    employment_type: str | None = None
    facility_ids: frozenset[int] = field(default_factory=frozenset)
    is_active: bool = True
