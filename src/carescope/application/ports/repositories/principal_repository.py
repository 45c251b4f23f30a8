"""Principal repository port."""

from typing import Protocol

from carescope.domain.entities import Principal
from carescope.domain.value_objects import Permission


class PrincipalRepository(Protocol):
    """Port for principal persistence (user record plus facility associations)."""

    async def get_by_id(self, principal_id: int) -> Principal | None: ...

    async def get_by_subject(self, subject: str) -> Principal | None: ...

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Principal]: ...

    async def set_permission_overrides(
        self, principal_id: int, overrides: frozenset[Permission] | None
    ) -> None: ...
