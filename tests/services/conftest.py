"""Service test fixtures — ledger, in-memory snapshot DB and FastAPI test client.

Invariants:
    - Every test gets a fresh IgniteLedger with a deterministic clock and id factory
    - Every test gets a fresh in-memory SQLite database for snapshots
    - get_ledger / get_settings / get_snapshot_repository overridden on the app

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for snapshot tests
    - ASGITransport does not run the lifespan: fixtures build what startup would
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from ignite.api.dependencies import get_snapshot_repository
from ignite.config import Settings, get_settings
from ignite.core.ledger_policy import LedgerPolicy
from ignite.infrastructure.database import DatabaseSessionManager
from ignite.infrastructure.snapshot_store import SqlSnapshotStore
from ignite.main import app
from ignite.services.ignite_ledger import IgniteLedger, get_ledger

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Deterministic clock: every call advances one second."""

    def __init__(self, start: datetime = T0):
        self._ticks = itertools.count()
        self._start = start

    def __call__(self) -> datetime:
        return self._start + timedelta(seconds=next(self._ticks))


def sequential_ids():
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}_{next(counter)}"


@pytest.fixture
def ledger():
    return IgniteLedger(
        LedgerPolicy(), clock=StepClock(), id_factory=sequential_ids(),
    )


@pytest.fixture
def funded_ledger(ledger):
    """Four registered participants: alice (creator), bob, carol and dave (backers)."""
    ledger.register("alice", "Alice")
    ledger.register("bob", "Bob")
    ledger.register("carol", "Carol")
    ledger.register("dave", "Dave")
    return ledger


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
def snapshot_store(db_manager):
    return SqlSnapshotStore(db_manager, keep_last=3)


@pytest.fixture
def test_settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        seed_demo_data=False,
        feed_max_limit=50,
        public_app_url="https://ignite.example",
        twilio_account_sid="",
        twilio_api_key="",
        twilio_api_secret="",
        twilio_phone_number="",
    )


@pytest.fixture
async def client(ledger, snapshot_store, test_settings):
    """FastAPI test client wired to the per-test ledger and snapshot store."""
    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_snapshot_repository] = lambda: snapshot_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
