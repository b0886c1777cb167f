"""Tests for compute_participant_stats — pure summary from LedgerState, no IO."""

from ignite.core.participant_stats import compute_participant_stats
from ledger_builders import make_backing, make_spark, pledge


def test_unknown_participant_gets_zeros(state):
    assert compute_participant_stats(state, "ghost") == {
        "balance": 0, "sparks_created": 0, "sparks_backed": 0, "total_contributed": 0,
    }


def test_creator_counts_sparks_created(state):
    state.sparks["s2"] = make_spark("s2", "alice")
    stats = compute_participant_stats(state, "alice")
    assert stats["sparks_created"] == 2
    assert stats["balance"] == 10


def test_repeat_pledges_count_one_spark_backed(state):
    pledge(state, make_backing("b1", "s1", "bob", 3))
    pledge(state, make_backing("b2", "s1", "bob", 2))
    stats = compute_participant_stats(state, "bob")
    assert stats["sparks_backed"] == 1
    assert stats["total_contributed"] == 5
    assert stats["balance"] == 5
