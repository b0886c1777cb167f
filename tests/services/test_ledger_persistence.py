"""Ledger persistence — snapshot store round trips and best-effort save/restore."""

from ignite.core.errors import DatabaseError
from ignite.services.demo_seed import seed_demo_data
from ignite.services.ignite_ledger import IgniteLedger
from ignite.services.ledger_persistence import persist_snapshot, restore_latest


class _BrokenRepository:
    async def save(self, snapshot):
        raise DatabaseError("disk on fire", "commit")

    async def load_latest(self):
        raise DatabaseError("disk on fire", "query")


class _StaticRepository:
    def __init__(self, snapshot):
        self.snapshot = snapshot

    async def save(self, snapshot):
        self.snapshot = snapshot

    async def load_latest(self):
        return self.snapshot


async def test_store_returns_none_when_empty(snapshot_store):
    assert await snapshot_store.load_latest() is None


async def test_store_returns_newest_snapshot(snapshot_store):
    await snapshot_store.save({"version": 1, "n": 1})
    await snapshot_store.save({"version": 1, "n": 2})
    assert (await snapshot_store.load_latest())["n"] == 2


async def test_store_prunes_to_keep_last(snapshot_store, db_manager):
    from sqlalchemy import func, select
    from ignite.models.ledger_snapshot import LedgerSnapshot

    for n in range(6):
        await snapshot_store.save({"n": n})
    async with db_manager.session() as db:
        count = (await db.execute(select(func.count(LedgerSnapshot.id)))).scalar_one()
    assert count == 3


async def test_persist_then_restore_round_trip(ledger, snapshot_store):
    seed_demo_data(ledger)
    assert await persist_snapshot(ledger, snapshot_store) is True

    fresh = IgniteLedger()
    assert await restore_latest(fresh, snapshot_store) is True
    assert fresh.balance_of("alien_s01") == ledger.balance_of("alien_s01")
    assert [s.id for s in fresh.list_sparks()] == [s.id for s in ledger.list_sparks()]


async def test_persist_without_repository_is_skipped(ledger):
    assert await persist_snapshot(ledger, None) is False


async def test_persist_swallows_database_errors(ledger):
    assert await persist_snapshot(ledger, _BrokenRepository()) is False


async def test_restore_swallows_database_errors(ledger):
    assert await restore_latest(ledger, _BrokenRepository()) is False
    assert ledger.is_empty


async def test_restore_discards_malformed_snapshot(ledger):
    repository = _StaticRepository({"participants": [{"id": "x"}]})
    assert await restore_latest(ledger, repository) is False
    assert ledger.is_empty


async def test_restore_discards_snapshot_with_wrong_shapes(ledger):
    for snapshot in ({"balances": ["alice"]}, {"participants": ["not-a-dict"]}):
        assert await restore_latest(ledger, _StaticRepository(snapshot)) is False
        assert ledger.is_empty


async def test_restore_discards_snapshot_failing_audit(ledger):
    source = IgniteLedger()
    seed_demo_data(source)
    snapshot = source.to_snapshot()
    snapshot["sparks"][0]["raised"] = 999
    assert await restore_latest(ledger, _StaticRepository(snapshot)) is False
    assert ledger.is_empty


async def test_restore_with_nothing_saved(ledger, snapshot_store):
    assert await restore_latest(ledger, snapshot_store) is False
