"""Shift entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Shift:
    """Scheduled shift at one facility."""

    id: int
    facility_id: int
    title: str
    starts_at: datetime
    ends_at: datetime
    department: str | None = None
    status: str = "open"
    assigned_staff_id: int | None = None
