"""Role catalog endpoint."""

import falcon.asgi

from carescope.domain.role_permissions import default_permissions
from carescope.domain.value_objects import ALL_PERMISSIONS, Role


class RolesResource:
    """GET /api/roles - roles with labels and default permissions."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        items = []
        for role in Role:
            perms = ALL_PERMISSIONS if role is Role.SUPER_ADMIN else default_permissions(role)
            items.append({
                "role": str(role),
                "label": role.label,
                "description": role.description,
                "default_permissions": sorted(perms),
            })
        resp.media = {"items": items, "permissions": sorted(ALL_PERMISSIONS)}
        resp.status = falcon.HTTP_200
