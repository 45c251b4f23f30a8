"""Staff repository port."""

from typing import Protocol

from carescope.domain.entities import StaffMember


class StaffRepository(Protocol):
    async def get_by_id(self, staff_id: int) -> StaffMember | None: ...

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[StaffMember]: ...
