"""Shift template entity."""

from dataclasses import dataclass


@dataclass
class ShiftTemplate:
    """Recurring shift definition at one facility."""

    id: int
    facility_id: int
    name: str
    department: str | None = None
    start_time: str = "07:00"
    end_time: str = "19:00"
    is_active: bool = True
