"""Current principal endpoint - what UI guards render from."""

import falcon.asgi

from carescope.application.ports import AuthorizationGateway
from carescope.domain.exceptions import CareScopeError
from carescope.interfaces.api.resources.errors import respond_error, respond_unauthorized
from carescope.interfaces.api.resources.serializers import (
    impersonation_to_dict,
    principal_to_dict,
)


class MeResource:
    """GET /api/me - acting principal, effective permissions and visible facilities.

    UI guards use this to decide what to render. It is advisory only: every
    data endpoint enforces through the gateway on its own.
    """

    def __init__(self, gateway: AuthorizationGateway) -> None:
        self._gateway = gateway

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        try:
            ctx = await self._gateway.context(session)
        except CareScopeError as e:
            respond_error(resp, e)
            return

        resp.media = {
            "principal": principal_to_dict(ctx.acting),
            "permissions": sorted(ctx.permissions),
            "facilities": ctx.facility_scope.to_dict(),
            "impersonating": ctx.is_impersonating,
            "original_principal": (
                principal_to_dict(ctx.original) if ctx.is_impersonating else None
            ),
            "impersonation": impersonation_to_dict(ctx.impersonation),
        }
        resp.status = falcon.HTTP_200
