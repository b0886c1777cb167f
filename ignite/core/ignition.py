"""Ignition Rule Engine — decides when a spark crosses its backer quorum.

Invariants:
    - Quorum counts UNIQUE backers, never tokens raised
    - should_ignite is pure; ignite_spark is the only transition into IGNITED
    - Ignition is monotonic: an IGNITED spark never becomes ACTIVE again
    - On ignition raised is forced to goal (normalizes over- and under-funding)
"""

from datetime import datetime

from ignite.core.domain_types import SparkStatus
from ignite.core.entities import Spark


def should_ignite(spark: Spark, quorum: int) -> bool:
    return spark.status == SparkStatus.ACTIVE and spark.backer_count >= quorum


def backers_needed(backer_count: int, quorum: int) -> int:
    """Unique backers still missing before ignition (0 once reached)."""
    return max(0, quorum - backer_count)


def ignite_spark(spark: Spark, now: datetime) -> None:
    """Apply the ACTIVE -> IGNITED transition in place."""
    spark.status = SparkStatus.IGNITED
    spark.ignited_at = now
    spark.raised = spark.goal
