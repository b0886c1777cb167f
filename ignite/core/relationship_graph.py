"""Relationship Graph Builder — derives the participant/spark funding graph on demand.

Invariants:
    - Fully recomputed on every call; nothing is cached between calls
    - Nodes: every spark, plus every participant with nonzero activity
      (activity = pledges made + sparks created); idle participants are omitted
    - Spark activity = backer count + raised
    - Links: one creator->spark link per spark (fixed weight) and one backer->spark
      link PER BACKING — repeat pledges yield parallel links, each with its own amount

Design Decisions:
    - Output shape matches the force-graph front end ({nodes, links}), plain dicts
    - Counter over per-participant scans: one pass over backings and sparks
"""

from collections import Counter
from collections.abc import Iterable

from ignite.core.domain_types import (
    CREATOR_EDGE_WEIGHT, GRAPH_NAME_MAX_CHARS, GraphNodeType,
)
from ignite.core.entities import Backing, Participant, Spark


def _short_title(title: str) -> str:
    if len(title) > GRAPH_NAME_MAX_CHARS:
        return title[:GRAPH_NAME_MAX_CHARS] + "…"
    return title


def _spark_node(spark: Spark) -> dict:
    return {
        "id": spark.id,
        "name": _short_title(spark.title),
        "type": GraphNodeType.SPARK.value,
        "total_activity": spark.backer_count + spark.raised,
        "raised": spark.raised,
        "goal": spark.goal,
        "status": spark.status.value,
    }


def _participant_node(participant: Participant, activity: int) -> dict:
    return {
        "id": participant.id,
        "name": participant.display_name,
        "type": GraphNodeType.PARTICIPANT.value,
        "total_activity": activity,
        "verified": participant.verified,
    }


def build_relationship_graph(
    participants: Iterable[Participant],
    sparks: list[Spark],
    backings: list[Backing],
) -> dict:
    """Build {nodes, links} from current store contents. Pure, no IO."""
    pledge_counts = Counter(b.backer_id for b in backings)
    created_counts = Counter(s.creator_id for s in sparks)

    nodes = [_spark_node(s) for s in sparks]
    node_ids = {s.id for s in sparks}

    for participant in participants:
        activity = pledge_counts[participant.id] + created_counts[participant.id]
        if activity > 0:
            nodes.append(_participant_node(participant, activity))
            node_ids.add(participant.id)

    links = [
        {
            "source": s.creator_id, "target": s.id,
            "amount": CREATOR_EDGE_WEIGHT, "created_at": s.created_at.isoformat(),
        }
        for s in sparks if s.creator_id in node_ids
    ]
    links.extend(
        {
            "source": b.backer_id, "target": b.spark_id,
            "amount": b.amount, "created_at": b.created_at.isoformat(),
        }
        for b in backings
        if b.backer_id in node_ids and b.spark_id in node_ids
    )
    return {"nodes": nodes, "links": links}
