"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ParticipantId, SparkId, BackingId, FeedItemId wrap str — identities are externally
      issued (participants) or generated (sparks, backings, feed items)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (SSE payloads are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ParticipantId = NewType("ParticipantId", str)
SparkId = NewType("SparkId", str)
BackingId = NewType("BackingId", str)
FeedItemId = NewType("FeedItemId", str)


# ─── Enums ───────────────────────────────────────────────────────

class SparkStatus(str, Enum):
    """Spark lifecycle. COMPLETED is declared but nothing transitions into it."""
    ACTIVE = "active"
    IGNITED = "ignited"
    COMPLETED = "completed"


class SparkCategory(str, Enum):
    """Spark categories — unrecognized input coerces to OTHER."""
    CAUSE = "cause"
    ART = "art"
    TECH = "tech"
    COMMUNITY = "community"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: str | None) -> "SparkCategory":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class SparkFilter(str, Enum):
    """Listing filter for list_sparks."""
    ALL = "all"
    ACTIVE = "active"
    IGNITED = "ignited"


class FeedItemType(str, Enum):
    """Activity feed entry kinds."""
    SPARK_CREATED = "spark_created"
    BACKING = "backing"
    SPARK_IGNITED = "spark_ignited"


class EventKind(str, Enum):
    """Broadcaster notification kinds — also the SSE `event` field."""
    PARTICIPANT_JOINED = "participant_joined"
    SPARK_CREATED = "spark_created"
    BACKING = "backing"
    SPARK_IGNITED = "spark_ignited"


class GraphNodeType(str, Enum):
    PARTICIPANT = "user"
    SPARK = "spark"


class InsightType(str, Enum):
    """Advisory insight kinds emitted by the summarizer."""
    ALMOST_IGNITED = "almost_ignited"
    NEW_SPARK = "new_spark"


class TrendDirection(str, Enum):
    RISING = "rising"
    STABLE = "stable"
    FALLING = "falling"


# ─── Constants ───────────────────────────────────────────────────

IGNITION_ACTOR_NAME = "Community"
CREATOR_EDGE_WEIGHT = 2
GRAPH_NAME_MAX_CHARS = 18
