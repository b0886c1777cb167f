"""Insight summarizer — near-quorum and fresh sparks flagged, momentum bounded."""

from ignite.core.domain_types import SparkStatus, TrendDirection
from ignite.core.insights import community_score, compute_insights, trend_direction
from ledger_builders import T0, make_spark


def _types(result):
    return [(i["type"], i["spark_id"]) for i in result["insights"]]


def test_spark_one_backer_short_is_almost_ignited(policy):
    spark = make_spark(goal=20, raised=10, backer_ids=["bob", "carol"])
    result = compute_insights([spark], 2, policy, T0)
    insight = result["insights"][0]
    assert insight["id"] == "ai_s1"
    assert insight["type"] == "almost_ignited"
    assert insight["confidence"] == 0.95
    assert insight["message"] == (
        '"Community Garden" needs just 1 more backer to ignite! 50% funded.'
    )


def test_spark_without_backers_is_new(policy):
    result = compute_insights([make_spark()], 0, policy, T0)
    insight = result["insights"][0]
    assert insight["id"] == "ai_new_s1"
    assert insight["type"] == "new_spark"
    assert insight["confidence"] == 0.7


def test_near_quorum_insights_listed_first(policy):
    fresh = make_spark("s1")
    close = make_spark("s2", backer_ids=["bob", "carol"], raised=4)
    result = compute_insights([fresh, close], 2, policy, T0)
    assert _types(result) == [("almost_ignited", "s2"), ("new_spark", "s1")]


def test_ignited_sparks_never_flagged(policy):
    spark = make_spark(backer_ids=["a", "b"], status=SparkStatus.IGNITED)
    assert compute_insights([spark], 2, policy, T0)["insights"] == []


def test_insights_capped_at_limit(policy):
    sparks = [make_spark(f"s{i}") for i in range(8)]
    assert len(compute_insights(sparks, 0, policy, T0)["insights"]) == 5


def test_last_analysis_is_now(policy):
    assert compute_insights([], 0, policy, T0)["last_analysis"] == T0.isoformat()


def test_community_score_bounded(policy):
    assert community_score(0, 0, 0, policy) == 0
    assert community_score(4, 1, 3, policy) == 55
    assert community_score(20, 10, 20, policy) == 100


def test_trend_direction_thresholds(policy):
    assert trend_direction(6, policy) == TrendDirection.RISING
    assert trend_direction(5, policy) == TrendDirection.STABLE
    assert trend_direction(3, policy) == TrendDirection.STABLE
    assert trend_direction(2, policy) == TrendDirection.FALLING
