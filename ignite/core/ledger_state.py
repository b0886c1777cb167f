"""Ledger State — the process-wide store of participants, balances, sparks, backings and feed.

Invariants:
    - backings and feed are append-only
    - balances and allocations have an entry for every registered participant
    - allocations records the grant each participant actually received, so a later
      change of the configured initial balance never rewrites history
    - sparks preserves insertion order (creation order)

Design Decisions:
    - In-memory not DB (ADR: single-process service, snapshots are best-effort)
    - Plain dataclass, no locking: IgniteLedger owns the lock and is the only writer
"""

from dataclasses import dataclass, field

from ignite.core.domain_types import ParticipantId, SparkId
from ignite.core.entities import Backing, FeedItem, Participant, Spark


@dataclass
class LedgerState:
    """Whole-ledger state — pure dataclass, no IO."""

    participants: dict[ParticipantId, Participant] = field(default_factory=dict)
    balances: dict[ParticipantId, int] = field(default_factory=dict)
    allocations: dict[ParticipantId, int] = field(default_factory=dict)
    sparks: dict[SparkId, Spark] = field(default_factory=dict)
    backings: list[Backing] = field(default_factory=list)
    feed: list[FeedItem] = field(default_factory=list)  # oldest first

    # --- Computed properties ---------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.participants and not self.sparks

    @property
    def total_pledged(self) -> int:
        return sum(b.amount for b in self.backings)
