"""Audit log API resource."""

import falcon.asgi

from carescope.application.use_cases.audit.list_audit_logs import ListAuditLogsUseCase
from carescope.domain.exceptions import CareScopeError
from carescope.interfaces.api.resources.errors import respond_error, respond_unauthorized
from carescope.interfaces.api.resources.serializers import audit_entry_to_dict

MAX_LIMIT = 500


class AuditLogsResource:
    """GET /api/audit-logs?action=&limit= - newest entries first."""

    def __init__(self, list_audit_logs: ListAuditLogsUseCase) -> None:
        self._list = list_audit_logs

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        action = req.get_param("action")
        limit = req.get_param_as_int("limit", min_value=1, max_value=MAX_LIMIT, default=100)

        try:
            entries = await self._list.execute(session, action=action, limit=limit)
        except CareScopeError as e:
            respond_error(resp, e)
            return

        resp.media = {"items": [audit_entry_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200
