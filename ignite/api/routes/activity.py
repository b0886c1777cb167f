"""Activity — read-only derivations: feed, relationship graph, insights.

Invariants:
    - No route here mutates the ledger
    - Feed limit defaults to feed_default_limit and is clamped to feed_max_limit
"""

from fastapi import APIRouter, Depends, Query

from ignite.config import Settings, get_settings
from ignite.schemas.graph import GraphData, InsightSummary
from ignite.services.ignite_ledger import IgniteLedger, get_ledger

router = APIRouter(prefix="/api/v1", tags=["activity"])


@router.get("/feed")
async def get_feed(
    limit: int | None = Query(None, ge=1),
    ledger: IgniteLedger = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """Newest-first activity feed."""
    effective = min(limit or settings.feed_default_limit, settings.feed_max_limit)
    return {"feed": [item.to_dict() for item in ledger.get_feed(effective)]}


@router.get("/graph", response_model=GraphData, response_model_exclude_none=True)
async def get_graph(ledger: IgniteLedger = Depends(get_ledger)):
    """Participant/spark funding graph, recomputed per request."""
    return ledger.build_graph()


@router.get("/insights", response_model=InsightSummary)
async def get_insights(ledger: IgniteLedger = Depends(get_ledger)):
    return ledger.get_insights()
