"""Impersonation API resources."""

import falcon.asgi

from carescope.application.ports import AuthorizationGateway, ImpersonationContext
from carescope.domain.exceptions import CareScopeError
from carescope.interfaces.api.resources.errors import respond_error, respond_unauthorized
from carescope.interfaces.api.resources.serializers import (
    impersonation_to_dict,
    principal_to_dict,
)


class ImpersonationResource:
    """Start, stop and inspect impersonation for the caller's session.

    POST /api/admin/impersonate/{target_id}  (suffix "target")
    POST /api/admin/impersonate/stop         (suffix "stop")
    GET  /api/admin/impersonate/status       (suffix "status")
    """

    def __init__(
        self,
        impersonation_context: ImpersonationContext,
        gateway: AuthorizationGateway,
    ) -> None:
        self._impersonation = impersonation_context
        self._gateway = gateway

    async def _status(self, session) -> dict:
        ctx = await self._gateway.context(session)
        return {
            "impersonating": ctx.is_impersonating,
            "acting_principal": principal_to_dict(ctx.acting),
            "original_principal": principal_to_dict(ctx.original),
            "impersonation": impersonation_to_dict(ctx.impersonation),
        }

    async def on_post_target(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        target_id: int,
    ) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        try:
            await self._impersonation.start(session, target_id)
            resp.media = await self._status(session)
        except CareScopeError as e:
            respond_error(resp, e)
            return
        resp.status = falcon.HTTP_201

    async def on_post_stop(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        try:
            ended = await self._impersonation.end(session)
        except CareScopeError as e:
            respond_error(resp, e)
            return
        resp.media = {"ok": True, "ended": ended}
        resp.status = falcon.HTTP_200

    async def on_get_status(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        try:
            resp.media = await self._status(session)
        except CareScopeError as e:
            respond_error(resp, e)
            return
        resp.status = falcon.HTTP_200
