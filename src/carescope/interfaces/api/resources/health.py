"""Liveness and readiness probes."""

import falcon.asgi

from carescope.infrastructure.persistence.postgres.connection import ping


class HealthResource:
    """GET /health and GET /health/ready. Neither needs a session."""

    def __init__(self, pool=None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """503 while the database is unreachable."""
        if self._pool is not None and not await ping(self._pool):
            resp.media = {"status": "unavailable"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
