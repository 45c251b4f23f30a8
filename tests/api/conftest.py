"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from carescope.application.dto.session import SessionIdentity
from carescope.domain.value_objects import Permission, Role
from carescope.infrastructure.authorization.gateway import FacilityAuthorizationGateway
from carescope.infrastructure.authorization.impersonation_context import (
    SessionImpersonationContext,
)
from carescope.interfaces.api.app import create_app

from tests.conftest import make_principal, seed_records


class AuthBypassMiddleware:
    """Middleware that sets context.session from X-Test-Subject / X-Test-Session."""

    async def process_request(self, req, resp):
        req.context.session = None
        subject = req.get_header("X-Test-Subject")
        if subject:
            req.context.session = SessionIdentity(
                session_id=req.get_header("X-Test-Session") or "test-session",
                subject=subject,
            )


def as_user(principal_id: int, session_id: str = "test-session") -> dict:
    """Request headers authenticating as the principal with that id."""
    return {"X-Test-Subject": f"user-{principal_id}", "X-Test-Session": session_id}


@pytest.fixture
def people(fake_uow):
    """1 super admin, 2 facility admin @1, 3 supervisor @1, 4 employee @2, 5 billing @1+2."""
    seed_records(fake_uow)
    fake_uow.principals.add(make_principal(1, Role.SUPER_ADMIN))
    fake_uow.principals.add(make_principal(2, Role.FACILITY_ADMIN, (1,), primary=1))
    fake_uow.principals.add(make_principal(3, Role.SUPERVISOR, (1,), primary=1))
    fake_uow.principals.add(make_principal(4, Role.EMPLOYEE, (2,)))
    fake_uow.principals.add(
        make_principal(
            5, Role.BILLING, (1, 2), primary=2, overrides={Permission.VIEW_BILLING}
        )
    )
    return fake_uow


@pytest.fixture
def app(uow_factory, people, clock):
    """Falcon ASGI app with API resources for testing."""
    impersonation = SessionImpersonationContext(uow_factory, clock=clock)
    gateway = FacilityAuthorizationGateway(impersonation)
    return create_app(
        uow_factory,
        gateway,
        impersonation,
        middleware=[AuthBypassMiddleware()],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
