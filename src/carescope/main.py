"""Application entry point and composition root."""

import logging

import falcon

from carescope import __version__
from carescope.config import get_settings
from carescope.infrastructure.auth.keycloak_provider import KeycloakProvider
from carescope.infrastructure.authorization.gateway import FacilityAuthorizationGateway
from carescope.infrastructure.authorization.impersonation_context import (
    SessionImpersonationContext,
)
from carescope.infrastructure.persistence.postgres.connection import create_pool
from carescope.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from carescope.interfaces.api.app import create_app
from carescope.interfaces.api.middleware.auth import AuthMiddleware
from carescope.interfaces.api.middleware.cors import CORSMiddleware
from carescope.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from carescope.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def log_exception(req, resp, ex, params):
    """Last-resort handler: log with traceback, answer a bare 500."""
    logger.exception("unhandled error: %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_carescope_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("keycloak client secret not set: all API requests will be 401")

    impersonation_context = SessionImpersonationContext(
        uow_factory, ttl=settings.impersonation_ttl
    )
    gateway = FacilityAuthorizationGateway(impersonation_context)

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = create_app(
        uow_factory,
        gateway,
        impersonation_context,
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
        health_resource=HealthResource(pool),
    )
    app.add_error_handler(Exception, log_exception)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    app = create_carescope_app()
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level=settings.log_level.lower())


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("CareScope v%s (%s)", __version__, settings.environment)
    run_server()
