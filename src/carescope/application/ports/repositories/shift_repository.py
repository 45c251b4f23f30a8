"""Shift repository port."""

from typing import Protocol

from carescope.domain.entities import Shift


class ShiftRepository(Protocol):
    async def get_by_id(self, shift_id: int) -> Shift | None: ...

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Shift]: ...
