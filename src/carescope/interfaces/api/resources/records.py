"""Facility-scoped record API resources (staff, shifts, templates, invoices)."""

from collections.abc import Callable

import falcon.asgi

from carescope.application.use_cases.records.list_scoped_records import (
    GetScopedRecordUseCase,
    ListScopedRecordsUseCase,
)
from carescope.domain.exceptions import CareScopeError
from carescope.interfaces.api.resources.errors import respond_error, respond_unauthorized


class ScopedCollectionResource:
    """GET /api/<records> - records the acting principal may see.

    ?facility_id= (or ?facilityId=) narrows the list to one facility of the
    caller's scope, other facilities are 403.
    """

    def __init__(
        self,
        list_records: ListScopedRecordsUseCase,
        serialize: Callable[[object], dict],
    ) -> None:
        self._list = list_records
        self._serialize = serialize

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        facility_id = req.get_param_as_int("facility_id")
        if facility_id is None:
            facility_id = req.get_param_as_int("facilityId")

        try:
            records = await self._list.execute(session, facility_id)
        except CareScopeError as e:
            respond_error(resp, e)
            return

        resp.media = {"items": [self._serialize(r) for r in records]}
        resp.status = falcon.HTTP_200


class ScopedItemResource:
    """GET /api/<records>/{record_id} - one record, 404 when outside scope."""

    def __init__(
        self,
        get_record: GetScopedRecordUseCase,
        serialize: Callable[[object], dict],
    ) -> None:
        self._get = get_record
        self._serialize = serialize

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_id: int,
    ) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        try:
            record = await self._get.execute(session, record_id)
        except CareScopeError as e:
            respond_error(resp, e)
            return

        resp.media = self._serialize(record)
        resp.status = falcon.HTTP_200
