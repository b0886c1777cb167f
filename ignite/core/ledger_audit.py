"""Ledger Audit — replays the backing ledger and reports invariant violations.

Invariants:
    - audit_ledger is PURE: reads LedgerState, returns a list of violation strings
    - Empty list means: no negative balance, tokens conserved, backer sets unique and
      free of creators, and every spark's raised/backer_ids match the replayed backings
      (raised == goal for IGNITED sparks)
    - Conservation is checked against each participant's recorded grant, not the
      currently configured initial balance

Design Decisions:
    - Off the hot path: back_spark maintains caches incrementally; the audit runs on
      snapshot restore and in tests only (ADR: back_spark stays O(1) amortized)
"""

from collections import defaultdict

from ignite.core.domain_types import SparkStatus
from ignite.core.ledger_state import LedgerState


def _replay(state: LedgerState) -> tuple[dict[str, int], dict[str, list[str]]]:
    """Replay backings into per-spark sums and ordered distinct backers."""
    sums: dict[str, int] = defaultdict(int)
    backers: dict[str, list[str]] = defaultdict(list)
    for b in state.backings:
        sums[b.spark_id] += b.amount
        if b.backer_id not in backers[b.spark_id]:
            backers[b.spark_id].append(b.backer_id)
    return sums, backers


def _balance_violations(state: LedgerState, default_allocation: int) -> list[str]:
    violations = [
        f"balance of {pid} is negative ({bal})"
        for pid, bal in state.balances.items() if bal < 0
    ]
    missing = [pid for pid in state.participants if pid not in state.balances]
    violations.extend(f"participant {pid} has no balance" for pid in missing)

    # Recorded grants win; the default only covers snapshots written before they were kept
    allocated = sum(
        state.allocations.get(pid, default_allocation) for pid in state.participants
    )
    held = sum(state.balances.values())
    if allocated - held != state.total_pledged:
        violations.append(
            f"conservation broken: allocated {allocated} - held {held} "
            f"!= pledged {state.total_pledged}"
        )
    return violations


def _spark_violations(state: LedgerState) -> list[str]:
    sums, replayed_backers = _replay(state)
    violations = []
    for spark in state.sparks.values():
        if len(set(spark.backer_ids)) != len(spark.backer_ids):
            violations.append(f"spark {spark.id} has duplicate backers")
        if spark.creator_id in spark.backer_ids:
            violations.append(f"spark {spark.id} lists its creator as backer")
        if spark.backer_ids != replayed_backers.get(spark.id, []):
            violations.append(f"spark {spark.id} backer set does not match backings")
        expected = spark.goal if spark.status == SparkStatus.IGNITED else sums.get(spark.id, 0)
        if spark.raised != expected:
            violations.append(
                f"spark {spark.id} raised {spark.raised}, expected {expected}"
            )
    orphans = {b.spark_id for b in state.backings} - set(state.sparks)
    violations.extend(f"backing references unknown spark {sid}" for sid in sorted(orphans))
    return violations


def audit_ledger(state: LedgerState, default_allocation: int) -> list[str]:
    """Violations of the ledger invariants; empty when the state is consistent.

    default_allocation stands in for participants with no recorded grant.
    """
    return _balance_violations(state, default_allocation) + _spark_violations(state)
