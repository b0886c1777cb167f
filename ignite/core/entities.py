"""Ledger Entities — participants, sparks, backings and feed items.

Invariants:
    - Participant, Backing, FeedItem are frozen: immutable once created
    - Spark is the only mutable entity (raised, backer_ids, status, ignited_at)
    - creator_name / backer_name / spark_title are snapshots taken at the moment of action
    - to_dict() output is JSON-safe (Enums as values, datetimes as ISO strings)

Design Decisions:
    - Plain dataclasses, no ORM: the store is in-memory (ADR: single-process service)
    - Spark.copy() hands out detached copies so callers never hold the store's list
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from ignite.core.domain_types import (
    BackingId, FeedItemId, FeedItemType, ParticipantId, SparkCategory, SparkId,
    SparkStatus,
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class Participant:
    """A verified human registered with the identity registry."""
    id: ParticipantId
    display_name: str
    created_at: datetime
    verified: bool = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "verified": self.verified,
            "created_at": _iso(self.created_at),
        }


@dataclass
class Spark:
    """A funding campaign. raised/backer_ids are caches over the backing ledger."""
    id: SparkId
    creator_id: ParticipantId
    creator_name: str
    title: str
    description: str
    category: SparkCategory
    goal: int
    created_at: datetime
    raised: int = 0
    backer_ids: list[ParticipantId] = field(default_factory=list)
    status: SparkStatus = SparkStatus.ACTIVE
    ignited_at: datetime | None = None

    @property
    def backer_count(self) -> int:
        return len(self.backer_ids)

    @property
    def is_active(self) -> bool:
        return self.status == SparkStatus.ACTIVE

    def copy(self) -> "Spark":
        """Detached copy — the backer list is not shared with the store."""
        return replace(self, backer_ids=list(self.backer_ids))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "creator_id": self.creator_id,
            "creator_name": self.creator_name,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "goal": self.goal,
            "raised": self.raised,
            "backer_ids": list(self.backer_ids),
            "status": self.status.value,
            "created_at": _iso(self.created_at),
            "ignited_at": _iso(self.ignited_at),
        }


@dataclass(frozen=True)
class Backing:
    """One accepted pledge. The backing list is the append-only audit trail."""
    id: BackingId
    spark_id: SparkId
    spark_title: str
    backer_id: ParticipantId
    backer_name: str
    amount: int
    created_at: datetime
    note: str | None = None
    payment_ref: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "spark_id": self.spark_id,
            "spark_title": self.spark_title,
            "backer_id": self.backer_id,
            "backer_name": self.backer_name,
            "amount": self.amount,
            "note": self.note,
            "created_at": _iso(self.created_at),
            "payment_ref": self.payment_ref,
        }


@dataclass(frozen=True)
class FeedItem:
    """Display projection of a spark lifecycle event."""
    id: FeedItemId
    type: FeedItemType
    spark_id: SparkId
    spark_title: str
    actor_name: str
    created_at: datetime
    amount: int | None = None
    note: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "spark_id": self.spark_id,
            "spark_title": self.spark_title,
            "actor_name": self.actor_name,
            "amount": self.amount,
            "note": self.note,
            "created_at": _iso(self.created_at),
        }
