"""Insight Summarizer — advisory signals recomputed from current state on every read.

Invariants:
    - compute_insights is PURE and holds no state between calls
    - Every ACTIVE spark exactly one backer short of quorum yields an almost_ignited insight
    - Every ACTIVE spark with zero backers yields a new_spark insight
    - community_score is bounded to 0..100
    - Output list capped at policy.insight_limit, near-ignition insights first

Design Decisions:
    - Scoring constants live in LedgerPolicy, not here: nothing correctness-critical
      depends on them (ADR: advisory UI content)
"""

import math
from datetime import datetime

from ignite.core.domain_types import InsightType, SparkStatus, TrendDirection
from ignite.core.entities import Spark
from ignite.core.ignition import backers_needed
from ignite.core.ledger_policy import LedgerPolicy

ALMOST_IGNITED_CONFIDENCE = 0.95
NEW_SPARK_CONFIDENCE = 0.7


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _funded_percent(spark: Spark) -> int:
    return _round_half_up(spark.raised / max(spark.goal, 1) * 100)


def _insight(
    kind: InsightType, spark: Spark, message: str, confidence: float, now: datetime,
) -> dict:
    prefix = "ai" if kind == InsightType.ALMOST_IGNITED else "ai_new"
    return {
        "id": f"{prefix}_{spark.id}",
        "type": kind.value,
        "message": message,
        "confidence": confidence,
        "spark_id": spark.id,
        "created_at": now.isoformat(),
    }


def community_score(total: int, ignited: int, active: int, policy: LedgerPolicy) -> int:
    ratio = ignited / max(total, 1) * 100
    return max(0, min(100, _round_half_up(ratio + active * policy.momentum_active_bonus)))


def trend_direction(backing_count: int, policy: LedgerPolicy) -> TrendDirection:
    if backing_count > policy.trend_rising_above:
        return TrendDirection.RISING
    if backing_count > policy.trend_stable_above:
        return TrendDirection.STABLE
    return TrendDirection.FALLING


def compute_insights(
    sparks: list[Spark], backing_count: int, policy: LedgerPolicy, now: datetime,
) -> dict:
    """Summarize near-quorum and fresh sparks plus global momentum. Pure, no IO."""
    active = [s for s in sparks if s.status == SparkStatus.ACTIVE]
    ignited_count = sum(1 for s in sparks if s.status == SparkStatus.IGNITED)

    insights = [
        _insight(
            InsightType.ALMOST_IGNITED, s,
            f'"{s.title}" needs just 1 more backer to ignite! '
            f"{_funded_percent(s)}% funded.",
            ALMOST_IGNITED_CONFIDENCE, now,
        )
        for s in active if backers_needed(s.backer_count, policy.ignite_quorum) == 1
    ]
    insights.extend(
        _insight(
            InsightType.NEW_SPARK, s,
            f'"{s.title}" just launched, be the first to back it!',
            NEW_SPARK_CONFIDENCE, now,
        )
        for s in active if s.backer_count == 0
    )

    return {
        "insights": insights[:policy.insight_limit],
        "last_analysis": now.isoformat(),
        "community_score": community_score(
            len(sparks), ignited_count, len(active), policy,
        ),
        "trend_direction": trend_direction(backing_count, policy).value,
    }
