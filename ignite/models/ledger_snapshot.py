"""Ledger Snapshot ORM — append-only rows holding the whole ledger as JSON.

Invariants:
    - Rows are never updated; the newest row (highest id) is the one restored
    - snapshot is the output of ledger_state_to_snapshot (JSON-safe dict)

Design Decisions:
    - One JSON column over normalized tables: the ledger is in-memory and snapshots
      are best-effort (ADR: durability is a non-goal)
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from ignite.db.base import Base


class LedgerSnapshot(Base):
    __tablename__ = "ledger_snapshots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    snapshot: Mapped[dict] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
