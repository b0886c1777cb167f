"""Route Dependencies — shared FastAPI dependencies and result unwrapping.

Invariants:
    - unwrap() is the ONLY place a returned ledger error becomes a raised exception,
      so the global IgniteError handler renders it
    - get_snapshot_repository returns None when snapshots are disabled or the database
      was never initialized; persistence helpers treat None as "skip"
    - ensure_registered only auto-registers when the caller supplied a display name
"""

from typing import TypeVar

from fastapi import Depends

import ignite.infrastructure.database as db_module
from ignite.config import Settings, get_settings
from ignite.core.errors import IgniteError
from ignite.core.repository_protocols import SnapshotRepository
from ignite.infrastructure.snapshot_store import SqlSnapshotStore
from ignite.services.ignite_ledger import IgniteLedger

T = TypeVar("T")


def get_snapshot_repository(
    settings: Settings = Depends(get_settings),
) -> SnapshotRepository | None:
    if not settings.snapshot_enabled or db_module.db_manager is None:
        return None
    return SqlSnapshotStore(db_module.db_manager, settings.snapshot_keep_last)


def unwrap(result: T | IgniteError) -> T:
    if isinstance(result, IgniteError):
        raise result
    return result


def ensure_registered(
    ledger: IgniteLedger, participant_id: str, display_name: str | None,
) -> None:
    """Auto-register on cold start (client holds a verified identity we lost)."""
    if display_name and ledger.lookup(participant_id) is None:
        ledger.register(participant_id, display_name)
