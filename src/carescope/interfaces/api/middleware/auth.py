"""Auth middleware - turns a bearer token into a session identity."""

import falcon.asgi

from carescope.application.dto.session import SessionIdentity


class AuthMiddleware:
    """Middleware that validates the access token and sets req.context.session.

    req.context.session is None when the request is unauthenticated;
    resources answer 401 in that case.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract session from Authorization header."""
        req.context.session = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        user = await self._keycloak.decode_token(auth[7:])
        if user:
            req.context.session = SessionIdentity(
                session_id=user.session_id,
                subject=user.subject,
            )
