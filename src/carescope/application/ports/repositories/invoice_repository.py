"""Invoice repository port."""

from typing import Protocol

from carescope.domain.entities import Invoice


class InvoiceRepository(Protocol):
    async def get_by_id(self, invoice_id: int) -> Invoice | None: ...

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Invoice]: ...
