"""Invoice entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Invoice:
    """Invoice billed to one facility."""

    id: int
    facility_id: int
    number: str
    amount: Decimal
    status: str = "draft"
    due_date: date | None = None
