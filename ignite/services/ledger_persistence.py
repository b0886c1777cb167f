"""Ledger Persistence — best-effort snapshot save and startup restore around the ledger.

Invariants:
    - persist_snapshot never raises: failures are logged, the client response is unaffected
    - restore_latest only applies a snapshot that passes audit_ledger
    - A broken or inconsistent snapshot is discarded (logged), never partially applied

Design Decisions:
    - Snapshot taken synchronously under the ledger lock, written asynchronously after:
      the ledger never awaits IO inside its critical section
    - Save-after-mutation, not periodic: the demo load is tiny and every accepted
      pledge is worth keeping (ADR: best-effort durability only)
"""

import logging

from ignite.core.errors import DatabaseError
from ignite.core.repository_protocols import SnapshotRepository
from ignite.services.ignite_ledger import IgniteLedger

logger = logging.getLogger(__name__)


async def persist_snapshot(
    ledger: IgniteLedger, repository: SnapshotRepository | None,
) -> bool:
    """Save the current ledger. Returns False (and logs) on any database failure."""
    if repository is None:
        return False
    try:
        await repository.save(ledger.to_snapshot())
        return True
    except DatabaseError as e:
        logger.error(f"Ledger snapshot save failed: {e.message}")
        return False


async def restore_latest(
    ledger: IgniteLedger, repository: SnapshotRepository | None,
) -> bool:
    """Restore the newest snapshot into the ledger. Returns whether one was applied."""
    if repository is None:
        return False
    try:
        snapshot = await repository.load_latest()
    except DatabaseError as e:
        logger.error(f"Ledger snapshot load failed: {e.message}")
        return False
    if not snapshot:
        logger.info("No ledger snapshot found, starting empty")
        return False

    try:
        violations = ledger.restore(snapshot)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.error(f"Ledger snapshot malformed, discarded: {e!r}")
        return False
    if violations:
        logger.error(
            f"Ledger snapshot failed audit, discarded: {'; '.join(violations[:5])}",
        )
        return False
    return True
