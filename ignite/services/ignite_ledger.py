"""Ignite Ledger — the single stateful service that owns the in-memory store.

Invariants:
    - Every mutation (register, create_spark, back_spark) runs inside one re-entrant lock:
      debit, raised/backer_ids update and the ignition check-and-transition are one
      critical section, so concurrent pledges can neither over-debit nor double-ignite
    - Domain failures are RETURNED (IgniteError instances), never raised, and leave
      registry, balances, store, feed and broadcaster untouched
    - Balances only move through back_spark; there is no public debit, so every token
      leaving a balance is matched by a recorded backing
    - Callers never receive the store's mutable objects: sparks are handed out as copies
    - Reads copy what they need under the lock and derive outside it

Design Decisions:
    - One object with explicit lifecycle over module-level collections: every mutation is
      funneled through the methods below (ADR: enforceable critical section)
    - RLock over Lock: listeners run synchronously inside the critical section and may
      read back from the ledger on the same thread
    - Clock and id factory injectable for deterministic tests
"""

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from ignite.core.activity_feed import (
    backing_item, ignition_item, recent_items, spark_created_item,
)
from ignite.core.domain_types import (
    EventKind, SparkCategory, SparkFilter, SparkStatus,
)
from ignite.core.enforce_backing import validate_backing
from ignite.core.enforce_spark import validate_spark_creation
from ignite.core.entities import Backing, FeedItem, Participant, Spark
from ignite.core.errors import IgniteError
from ignite.core.ignition import ignite_spark, should_ignite
from ignite.core.insights import compute_insights
from ignite.core.ledger_audit import audit_ledger
from ignite.core.ledger_policy import LedgerPolicy
from ignite.core.ledger_state import LedgerState
from ignite.core.ledger_state_snapshot import (
    ledger_state_from_snapshot, ledger_state_to_snapshot,
)
from ignite.core.participant_stats import compute_participant_stats
from ignite.core.relationship_graph import build_relationship_graph
from ignite.core.token_ledger import TokenLedger
from ignite.services.event_broadcaster import EventBroadcaster, Listener

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class IgniteLedger:
    """Identity registry, token ledger, spark store and feed behind one lock."""

    def __init__(
        self,
        policy: LedgerPolicy | None = None,
        broadcaster: EventBroadcaster | None = None,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[str], str] = _new_id,
    ):
        self.policy = policy or LedgerPolicy()
        self.broadcaster = broadcaster or EventBroadcaster()
        self._clock = clock
        self._new_id = id_factory
        self._lock = threading.RLock()
        self._state = LedgerState()
        self._tokens = TokenLedger(self._state.balances, self._state.allocations)

    # --- Identity registry -----------------------------------------------------

    def register(self, participant_id: str, display_name: str) -> Participant:
        """Idempotent: an existing identity is returned unchanged, no second grant."""
        with self._lock:
            existing = self._state.participants.get(participant_id)
            if existing:
                return existing
            participant = Participant(
                id=participant_id, display_name=display_name,
                created_at=self._clock(),
            )
            self._state.participants[participant_id] = participant
            self._tokens.grant_initial(participant_id, self.policy.initial_balance)
            logger.info(
                "Participant registered",
                extra={"participant_id": participant_id},
            )
            self.broadcaster.notify(
                EventKind.PARTICIPANT_JOINED,
                {"id": participant_id, "name": display_name},
            )
            return participant

    def lookup(self, participant_id: str) -> Participant | None:
        with self._lock:
            return self._state.participants.get(participant_id)

    # --- Token ledger ----------------------------------------------------------

    def balance_of(self, participant_id: str) -> int:
        with self._lock:
            return self._tokens.balance_of(participant_id)

    # --- Spark store & ignition ------------------------------------------------

    def create_spark(
        self,
        creator_id: str,
        title: str,
        description: str,
        goal: int,
        category: str | None = None,
    ) -> Spark | IgniteError:
        with self._lock:
            error = validate_spark_creation(
                self._state, self.policy, creator_id, title, description, goal,
            )
            if error:
                self._log_rejection("Spark creation rejected", error)
                return error

            creator = self._state.participants[creator_id]
            spark = Spark(
                id=self._new_id("spark"),
                creator_id=creator_id,
                creator_name=creator.display_name,
                title=title,
                description=description,
                category=SparkCategory.coerce(category),
                goal=goal,
                created_at=self._clock(),
            )
            self._state.sparks[spark.id] = spark
            self._state.feed.append(spark_created_item(self._new_id("f"), spark))
            logger.info(
                "Spark created",
                extra={"spark_id": spark.id, "participant_id": creator_id},
            )
            self.broadcaster.notify(EventKind.SPARK_CREATED, spark.to_dict())
            return spark.copy()

    def back_spark(
        self,
        spark_id: str,
        backer_id: str,
        amount: int,
        note: str | None = None,
        payment_ref: str | None = None,
    ) -> Backing | IgniteError:
        with self._lock:
            error = validate_backing(
                self._state, self.policy, spark_id, backer_id, amount,
            )
            if error:
                self._log_rejection("Backing rejected", error)
                return error

            # Validation already proved the balance covers the amount.
            self._tokens.debit(backer_id, amount)
            spark = self._state.sparks[spark_id]
            spark.raised += amount
            if backer_id not in spark.backer_ids:
                spark.backer_ids.append(backer_id)

            backing = Backing(
                id=self._new_id("b"),
                spark_id=spark_id,
                spark_title=spark.title,
                backer_id=backer_id,
                backer_name=self._state.participants[backer_id].display_name,
                amount=amount,
                created_at=self._clock(),
                note=note,
                payment_ref=payment_ref,
            )
            self._state.backings.append(backing)
            self._state.feed.append(backing_item(self._new_id("f"), backing))
            logger.info(
                "Spark backed",
                extra={"spark_id": spark_id, "participant_id": backer_id},
            )
            self.broadcaster.notify(EventKind.BACKING, backing.to_dict())

            if should_ignite(spark, self.policy.ignite_quorum):
                self._ignite(spark)
            return backing

    def _ignite(self, spark: Spark) -> None:
        now = self._clock()
        ignite_spark(spark, now)
        self._state.feed.append(ignition_item(self._new_id("f_ign"), spark, now))
        logger.info("Spark ignited", extra={"spark_id": spark.id})
        self.broadcaster.notify(EventKind.SPARK_IGNITED, spark.to_dict())

    def get_spark(self, spark_id: str) -> Spark | None:
        with self._lock:
            spark = self._state.sparks.get(spark_id)
            return spark.copy() if spark else None

    def list_sparks(self, status: SparkFilter = SparkFilter.ALL) -> list[Spark]:
        """Newest-created first; ties keep the later-inserted spark first."""
        status = SparkFilter(status)
        with self._lock:
            sparks = [s.copy() for s in self._state.sparks.values()]
        if status != SparkFilter.ALL:
            sparks = [s for s in sparks if s.status == SparkStatus(status.value)]
        return sorted(reversed(sparks), key=lambda s: s.created_at, reverse=True)

    # --- Reads / derivations ---------------------------------------------------

    def get_feed(self, limit: int = 20) -> list[FeedItem]:
        with self._lock:
            return recent_items(self._state.feed, limit)

    def build_graph(self) -> dict:
        with self._lock:
            participants = list(self._state.participants.values())
            sparks = [s.copy() for s in self._state.sparks.values()]
            backings = list(self._state.backings)
        return build_relationship_graph(participants, sparks, backings)

    def get_insights(self) -> dict:
        with self._lock:
            sparks = [s.copy() for s in self._state.sparks.values()]
            backing_count = len(self._state.backings)
        return compute_insights(sparks, backing_count, self.policy, self._clock())

    def participant_stats(self, participant_id: str) -> dict:
        with self._lock:
            return compute_participant_stats(self._state, participant_id)

    def subscribe(self, listener: Listener) -> Callable[[], bool]:
        return self.broadcaster.subscribe(listener)

    # --- Lifecycle -------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return self._state.is_empty

    def audit(self) -> list[str]:
        with self._lock:
            return audit_ledger(self._state, self.policy.initial_balance)

    def to_snapshot(self) -> dict:
        with self._lock:
            return ledger_state_to_snapshot(self._state)

    def restore(self, snapshot: dict) -> list[str]:
        """Replace the store with a snapshot if it passes the audit.

        Returns the audit violations; a non-empty list means nothing was applied.
        """
        candidate = ledger_state_from_snapshot(snapshot)
        violations = audit_ledger(candidate, self.policy.initial_balance)
        if violations:
            return violations
        for participant_id in candidate.participants:
            candidate.allocations.setdefault(participant_id, self.policy.initial_balance)
        with self._lock:
            self._state = candidate
            self._tokens = TokenLedger(candidate.balances, candidate.allocations)
        logger.info(
            "Ledger restored from snapshot: %d participants, %d sparks, %d backings",
            len(candidate.participants), len(candidate.sparks), len(candidate.backings),
        )
        return []

    def _log_rejection(self, message: str, error: IgniteError) -> None:
        logger.info(
            f"{message}: {error.message}",
            extra={
                "error_code": error.code,
                "participant_id": error.context.participant_id,
                "spark_id": error.context.spark_id,
            },
        )


# Singleton (initialized on startup)
ledger: IgniteLedger | None = None


def init_ledger(policy: LedgerPolicy) -> IgniteLedger:
    global ledger
    ledger = IgniteLedger(policy)
    return ledger


def get_ledger() -> IgniteLedger:
    """FastAPI dependency for the process-wide ledger."""
    if not ledger:
        raise RuntimeError("Ledger not initialized")
    return ledger
