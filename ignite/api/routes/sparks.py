"""Sparks — creation, listing, detail and backing.

Invariants:
    - Routes never contain ledger rules: they unwrap the ledger's typed result and the
      global handler renders any IgniteError
    - Every accepted mutation schedules a best-effort snapshot (BackgroundTasks)
    - Responses carry the actor's fresh stats so the client can update its balance
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from ignite.api.dependencies import (
    ensure_registered, get_snapshot_repository, unwrap,
)
from ignite.core.domain_types import SparkFilter
from ignite.core.errors import SparkNotFoundError
from ignite.core.repository_protocols import SnapshotRepository
from ignite.schemas.spark import BackingCreate, SparkCreate, spark_payload
from ignite.services.ignite_ledger import IgniteLedger, get_ledger
from ignite.services.ledger_persistence import persist_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sparks", tags=["sparks"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_spark(
    body: SparkCreate,
    background_tasks: BackgroundTasks,
    ledger: IgniteLedger = Depends(get_ledger),
    repository: SnapshotRepository | None = Depends(get_snapshot_repository),
):
    """Propose a new spark."""
    ensure_registered(ledger, body.creator_id, body.display_name)
    spark = unwrap(ledger.create_spark(
        body.creator_id, body.title, body.description, body.goal, body.category,
    ))
    background_tasks.add_task(persist_snapshot, ledger, repository)
    return {
        "spark": spark_payload(spark, ledger.policy),
        "stats": ledger.participant_stats(body.creator_id),
    }


@router.get("")
async def list_sparks(
    status_filter: SparkFilter = Query(SparkFilter.ALL, alias="status"),
    ledger: IgniteLedger = Depends(get_ledger),
):
    """List sparks newest first, optionally filtered by status."""
    return {
        "sparks": [
            spark_payload(s, ledger.policy) for s in ledger.list_sparks(status_filter)
        ],
    }


@router.get("/{spark_id}")
async def get_spark(spark_id: str, ledger: IgniteLedger = Depends(get_ledger)):
    spark = ledger.get_spark(spark_id)
    if spark is None:
        raise SparkNotFoundError(spark_id)
    return {"spark": spark_payload(spark, ledger.policy)}


@router.post("/{spark_id}/back", status_code=status.HTTP_201_CREATED)
async def back_spark(
    spark_id: str,
    body: BackingCreate,
    background_tasks: BackgroundTasks,
    ledger: IgniteLedger = Depends(get_ledger),
    repository: SnapshotRepository | None = Depends(get_snapshot_repository),
):
    """Pledge tokens to a spark. May ignite it."""
    ensure_registered(ledger, body.backer_id, body.display_name)
    backing = unwrap(ledger.back_spark(
        spark_id, body.backer_id, body.amount, body.note, body.payment_ref,
    ))
    background_tasks.add_task(persist_snapshot, ledger, repository)
    spark = ledger.get_spark(spark_id)
    return {
        "backing": backing.to_dict(),
        "spark": spark_payload(spark, ledger.policy),
        "stats": ledger.participant_stats(body.backer_id),
    }
