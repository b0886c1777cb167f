"""Ledger State Snapshot — serialization / deserialization for LedgerState.

Invariants:
    - ledger_state_to_snapshot produces a JSON-safe dict (no Enums, no datetimes)
    - ledger_state_from_snapshot reconstructs a LedgerState from any valid snapshot dict
    - Missing keys fall back to empty collections (forward-compatible)
    - Version 1 snapshots carry no allocations; the restoring ledger fills them from
      its policy once the audit has accepted the snapshot

Design Decisions:
    - Extracted from ledger_state.py: serialization is a persistence concern
    - Balances are stored separately from participants so a snapshot can be audited
      against the initial allocation without trusting either side
"""

from datetime import datetime

from ignite.core.domain_types import (
    FeedItemType, SparkCategory, SparkStatus,
)
from ignite.core.entities import Backing, FeedItem, Participant, Spark
from ignite.core.ledger_state import LedgerState

SNAPSHOT_VERSION = 2  # 2: per-participant allocations recorded


def _parse_dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def ledger_state_to_snapshot(state: LedgerState) -> dict:
    """Serialize LedgerState to JSON-safe dict. Pure, no IO."""
    return {
        "version": SNAPSHOT_VERSION,
        "participants": [p.to_dict() for p in state.participants.values()],
        "balances": dict(state.balances),
        "allocations": dict(state.allocations),
        "sparks": [s.to_dict() for s in state.sparks.values()],
        "backings": [b.to_dict() for b in state.backings],
        "feed": [f.to_dict() for f in state.feed],
    }


def _participant_from(data: dict) -> Participant:
    return Participant(
        id=data["id"],
        display_name=data["display_name"],
        created_at=_parse_dt(data["created_at"]),
        verified=data.get("verified", True),
    )


def _spark_from(data: dict) -> Spark:
    return Spark(
        id=data["id"],
        creator_id=data["creator_id"],
        creator_name=data["creator_name"],
        title=data["title"],
        description=data["description"],
        category=SparkCategory.coerce(data.get("category")),
        goal=data["goal"],
        created_at=_parse_dt(data["created_at"]),
        raised=data.get("raised", 0),
        backer_ids=list(data.get("backer_ids", [])),
        status=SparkStatus(data.get("status", SparkStatus.ACTIVE.value)),
        ignited_at=_parse_dt(data.get("ignited_at")),
    )


def _backing_from(data: dict) -> Backing:
    return Backing(
        id=data["id"],
        spark_id=data["spark_id"],
        spark_title=data["spark_title"],
        backer_id=data["backer_id"],
        backer_name=data["backer_name"],
        amount=data["amount"],
        created_at=_parse_dt(data["created_at"]),
        note=data.get("note"),
        payment_ref=data.get("payment_ref"),
    )


def _feed_item_from(data: dict) -> FeedItem:
    return FeedItem(
        id=data["id"],
        type=FeedItemType(data["type"]),
        spark_id=data["spark_id"],
        spark_title=data["spark_title"],
        actor_name=data["actor_name"],
        created_at=_parse_dt(data["created_at"]),
        amount=data.get("amount"),
        note=data.get("note"),
    )


def ledger_state_from_snapshot(data: dict | None) -> LedgerState:
    """Reconstruct LedgerState from snapshot dict. Pure, no IO.

    Raises KeyError/TypeError/ValueError/AttributeError on structurally broken
    entries; callers decide whether to discard the snapshot.
    """
    state = LedgerState()
    if not data:
        return state

    for raw in data.get("participants", []):
        participant = _participant_from(raw)
        state.participants[participant.id] = participant
    state.balances = {k: int(v) for k, v in data.get("balances", {}).items()}
    state.allocations = {k: int(v) for k, v in data.get("allocations", {}).items()}
    for raw in data.get("sparks", []):
        spark = _spark_from(raw)
        state.sparks[spark.id] = spark
    state.backings = [_backing_from(raw) for raw in data.get("backings", [])]
    state.feed = [_feed_item_from(raw) for raw in data.get("feed", [])]
    return state
