"""Snapshot Store — SQLAlchemy implementation of the SnapshotRepository protocol.

Invariants:
    - save() appends a row and prunes all but the newest `keep_last` rows
    - load_latest() returns the newest row's JSON or None
    - All database failures surface as DatabaseError (via DatabaseSessionManager)
"""

import logging

from sqlalchemy import delete, select

from ignite.infrastructure.database import DatabaseSessionManager
from ignite.models.ledger_snapshot import LedgerSnapshot

logger = logging.getLogger(__name__)


class SqlSnapshotStore:
    def __init__(self, manager: DatabaseSessionManager, keep_last: int = 20):
        self._manager = manager
        self._keep_last = max(keep_last, 1)

    async def save(self, snapshot: dict) -> None:
        async with self._manager.session() as db:
            row = LedgerSnapshot(snapshot=snapshot)
            db.add(row)
            await db.flush()
            await db.execute(
                delete(LedgerSnapshot).where(
                    LedgerSnapshot.id <= row.id - self._keep_last,
                ),
            )
            await db.commit()
        logger.debug("Ledger snapshot saved (id=%s)", row.id)

    async def load_latest(self) -> dict | None:
        async with self._manager.session() as db:
            result = await db.execute(
                select(LedgerSnapshot).order_by(LedgerSnapshot.id.desc()).limit(1),
            )
            row = result.scalar_one_or_none()
            return row.snapshot if row else None
