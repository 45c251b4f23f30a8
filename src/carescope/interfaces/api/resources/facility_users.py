"""Facility user API resources."""

import falcon.asgi

from carescope.application.use_cases.principal.set_permission_overrides import (
    SetPermissionOverridesUseCase,
)
from carescope.domain.exceptions import CareScopeError
from carescope.interfaces.api.resources.errors import respond_error, respond_unauthorized
from carescope.interfaces.api.resources.serializers import principal_to_dict


class FacilityUserPermissionsResource:
    """PATCH /api/facility-users/{user_id}/permissions - set or clear overrides."""

    def __init__(self, set_overrides: SetPermissionOverridesUseCase) -> None:
        self._set_overrides = set_overrides

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: int,
    ) -> None:
        session = getattr(req.context, "session", None)
        if not session:
            respond_unauthorized(resp)
            return

        body = await req.get_media(default_when_empty=None)
        if not isinstance(body, dict) or "permissions" not in body:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: permissions"}
            return
        permissions = body["permissions"]
        if permissions is not None and (
            not isinstance(permissions, list)
            or not all(isinstance(p, str) for p in permissions)
        ):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "permissions must be a list of strings or null"}
            return

        try:
            principal = await self._set_overrides.execute(session, user_id, permissions)
        except CareScopeError as e:
            respond_error(resp, e)
            return

        resp.media = principal_to_dict(principal)
        resp.status = falcon.HTTP_200
