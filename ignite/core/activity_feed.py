"""Activity Feed — builds feed items and reads them newest-first.

Invariants:
    - Feed items are projections of spark/backing events, never edited after append
    - Storage order is oldest-first; recent_items returns newest-first
    - recent_items never returns more than `limit` items (limit <= 0 returns none)
"""

from datetime import datetime

from ignite.core.domain_types import FeedItemId, FeedItemType, IGNITION_ACTOR_NAME
from ignite.core.entities import Backing, FeedItem, Spark


def spark_created_item(item_id: FeedItemId, spark: Spark) -> FeedItem:
    return FeedItem(
        id=item_id, type=FeedItemType.SPARK_CREATED,
        spark_id=spark.id, spark_title=spark.title,
        actor_name=spark.creator_name, created_at=spark.created_at,
    )


def backing_item(item_id: FeedItemId, backing: Backing) -> FeedItem:
    return FeedItem(
        id=item_id, type=FeedItemType.BACKING,
        spark_id=backing.spark_id, spark_title=backing.spark_title,
        actor_name=backing.backer_name, created_at=backing.created_at,
        amount=backing.amount, note=backing.note,
    )


def ignition_item(item_id: FeedItemId, spark: Spark, now: datetime) -> FeedItem:
    return FeedItem(
        id=item_id, type=FeedItemType.SPARK_IGNITED,
        spark_id=spark.id, spark_title=spark.title,
        actor_name=IGNITION_ACTOR_NAME, created_at=now,
    )


def recent_items(feed: list[FeedItem], limit: int) -> list[FeedItem]:
    if limit <= 0:
        return []
    return list(reversed(feed[-limit:]))
