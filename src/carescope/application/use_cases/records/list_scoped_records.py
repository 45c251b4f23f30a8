"""List and get facility-scoped records through the authorization gateway."""

from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from carescope.application.dto.session import SessionIdentity
from carescope.application.ports import AuthorizationGateway
from carescope.domain.exceptions import NotFound
from carescope.domain.value_objects import Permission

T = TypeVar("T")

ListLoader = Callable[[Any, frozenset[int] | None], Awaitable[list[T]]]
GetLoader = Callable[[Any, int], Awaitable[T | None]]


class ListScopedRecordsUseCase(Generic[T]):
    """Permission gate, then facility scope, then return.

    The loader gets the facility ids the query may be limited to (None when
    unrestricted). Its rows are scoped again before they are returned.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        gateway: AuthorizationGateway,
        permission: Permission,
        loader: ListLoader,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gateway = gateway
        self._permission = permission
        self._loader = loader

    async def execute(
        self, session: SessionIdentity | None, facility_id: int | None = None
    ) -> list[T]:
        """Records the acting principal may see, optionally from one facility.

        Raises PermissionDenied when the permission is missing or facility_id
        is outside the facility scope.
        """
        ctx = await self._gateway.require(session, self._permission)
        facility_ids = ctx.facility_filter(facility_id)
        async with self._uow_factory() as uow:
            records = await self._loader(uow, facility_ids)
        return ctx.scope(records, facility_id)


class GetScopedRecordUseCase(Generic[T]):
    """Single-record read; records outside scope look like missing ones."""

    def __init__(
        self,
        unit_of_work_factory: type,
        gateway: AuthorizationGateway,
        permission: Permission,
        loader: GetLoader,
        entity: str,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._gateway = gateway
        self._permission = permission
        self._loader = loader
        self._entity = entity

    async def execute(self, session: SessionIdentity | None, record_id: int) -> T:
        ctx = await self._gateway.require(session, self._permission)
        async with self._uow_factory() as uow:
            record = await self._loader(uow, record_id)
        if record is None:
            raise NotFound(self._entity, record_id)
        return ctx.ensure_in_scope(record, self._entity, record_id)
