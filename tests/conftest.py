"""Pytest fixtures for CareScope tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from carescope.application.dto.session import SessionIdentity
from carescope.domain.entities import (
    AuditAction,
    AuditEntry,
    FacilityAssociation,
    ImpersonationSession,
    Invoice,
    Principal,
    Shift,
    ShiftTemplate,
    StaffMember,
)
from carescope.domain.services.facility_scope_filter import facility_tags
from carescope.domain.value_objects import Permission, Role


# --- Fake repositories ---


class FakePrincipalRepository:
    """In-memory principal repository."""

    def __init__(self) -> None:
        self._by_id: dict[int, Principal] = {}
        self.list_calls: list[frozenset[int] | None] = []

    def add(self, principal: Principal) -> Principal:
        self._by_id[principal.id] = principal
        return principal

    async def get_by_id(self, principal_id: int) -> Principal | None:
        return self._by_id.get(principal_id)

    async def get_by_subject(self, subject: str) -> Principal | None:
        for p in self._by_id.values():
            if p.subject == subject:
                return p
        return None

    async def list(self, facility_ids: frozenset[int] | None = None) -> list[Principal]:
        self.list_calls.append(facility_ids)
        people = sorted(self._by_id.values(), key=lambda p: p.id)
        if facility_ids is None:
            return people
        return [p for p in people if p.facility_ids & facility_ids]

    async def set_permission_overrides(
        self, principal_id: int, overrides: frozenset[Permission] | None
    ) -> None:
        p = self._by_id.get(principal_id)
        if p:
            self._by_id[principal_id] = replace(p, permission_overrides=overrides)


class FakeImpersonationRepository:
    """In-memory session store for impersonation records."""

    def __init__(self) -> None:
        self._by_session: dict[str, ImpersonationSession] = {}

    async def get(self, session_id: str) -> ImpersonationSession | None:
        return self._by_session.get(session_id)

    async def put(self, impersonation: ImpersonationSession) -> None:
        self._by_session[impersonation.session_id] = impersonation

    async def delete(self, session_id: str) -> bool:
        return self._by_session.pop(session_id, None) is not None


class FakeAuditLogRepository:
    """In-memory append-only audit log."""

    def __init__(self) -> None:
        self.entries: list[AuditEntry] = []

    async def create(self, entry: AuditEntry) -> AuditEntry:
        self.entries.append(entry)
        return entry

    async def list(
        self,
        *,
        action: AuditAction | None = None,
        session_id: str | None = None,
        target_principal_ids: frozenset[int] | None = None,
        limit: int = 100,
    ) -> list[AuditEntry]:
        entries = [
            e
            for e in sorted(self.entries, key=lambda e: e.created_at, reverse=True)
            if (action is None or e.action is action)
            and (session_id is None or e.session_id == session_id)
            and (
                target_principal_ids is None
                or e.target_principal_id in target_principal_ids
            )
        ]
        return entries[:limit]


class FakeRecordRepository:
    """In-memory repository for staff, shifts, shift templates and invoices."""

    def __init__(self) -> None:
        self._by_id: dict[int, object] = {}
        self.list_calls: list[frozenset[int] | None] = []

    def add(self, *records) -> None:
        for r in records:
            self._by_id[r.id] = r

    async def get_by_id(self, record_id: int):
        return self._by_id.get(record_id)

    async def list(self, facility_ids: frozenset[int] | None = None) -> list:
        self.list_calls.append(facility_ids)
        records = [self._by_id[k] for k in sorted(self._by_id)]
        if facility_ids is None:
            return records
        return [r for r in records if facility_tags(r) & facility_ids]


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.principals = FakePrincipalRepository()
        self.impersonations = FakeImpersonationRepository()
        self.audit_logs = FakeAuditLogRepository()
        self.staff = FakeRecordRepository()
        self.shifts = FakeRecordRepository()
        self.shift_templates = FakeRecordRepository()
        self.invoices = FakeRecordRepository()
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


@asynccontextmanager
async def fake_uow_factory() -> AsyncIterator[FakeUnitOfWork]:
    """Factory that yields a fresh FakeUnitOfWork per call."""
    uow = FakeUnitOfWork()
    yield uow


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory that yields the same uow on every call, so state survives requests."""

    @asynccontextmanager
    async def _factory():
        yield uow

    return _factory


# --- Builders ---


def make_principal(
    principal_id: int,
    role: Role | None,
    facilities: tuple[int, ...] = (),
    *,
    primary: int | None = None,
    overrides: set[Permission] | None = None,
    is_active: bool = True,
) -> Principal:
    """Principal with subject "user-<id>" associated with facilities."""
    return Principal(
        id=principal_id,
        subject=f"user-{principal_id}",
        role=role,
        email=f"user{principal_id}@example.org",
        display_name=f"User {principal_id}",
        permission_overrides=frozenset(overrides) if overrides is not None else None,
        facility_associations=frozenset(
            FacilityAssociation(
                principal_id=principal_id,
                facility_id=f,
                is_primary=(f == primary),
            )
            for f in facilities
        ),
        is_active=is_active,
    )


def session_for(principal: Principal, session_id: str = "sess-1") -> SessionIdentity:
    return SessionIdentity(session_id=session_id, subject=principal.subject)


def seed_records(uow: FakeUnitOfWork) -> None:
    """Two facilities worth of records; staff 3 works at both, staff 4 at none."""
    start = datetime(2026, 1, 5, 7, 0, tzinfo=UTC)
    end = start + timedelta(hours=12)
    uow.staff.add(
        StaffMember(id=1, first_name="Ana", last_name="Ruiz", facility_ids=frozenset({1})),
        StaffMember(id=2, first_name="Ben", last_name="Okafor", facility_ids=frozenset({2})),
        StaffMember(id=3, first_name="Cy", last_name="Lind", facility_ids=frozenset({1, 2})),
        StaffMember(id=4, first_name="Dee", last_name="Park"),
    )
    uow.shifts.add(
        Shift(id=10, facility_id=1, title="ICU day", starts_at=start, ends_at=end),
        Shift(id=11, facility_id=2, title="ER night", starts_at=start, ends_at=end),
    )
    uow.shift_templates.add(
        ShiftTemplate(id=20, facility_id=1, name="Day 7-7"),
        ShiftTemplate(
            id=21, facility_id=2, name="Night 7-7", start_time="19:00", end_time="07:00"
        ),
    )
    uow.invoices.add(
        Invoice(id=30, facility_id=1, number="INV-0001", amount=Decimal("1200.00")),
        Invoice(id=31, facility_id=2, number="INV-0002", amount=Decimal("980.50")),
    )


class FakeClock:
    """Settable clock for expiry tests."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow):
    """Factory returning async context manager that yields fake_uow."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 5, 9, 0, tzinfo=UTC))
