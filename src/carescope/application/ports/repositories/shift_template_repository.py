"""Shift template repository port."""

from typing import Protocol

from carescope.domain.entities import ShiftTemplate


class ShiftTemplateRepository(Protocol):
    async def get_by_id(self, template_id: int) -> ShiftTemplate | None: ...

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[ShiftTemplate]: ...
