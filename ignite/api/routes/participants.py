"""Participants — identity registration and lookup.

Invariants:
    - POST /verify is idempotent: re-verifying returns the original participant and
      grants no additional balance
    - Unknown participants answer 403 NOT_REGISTERED (same error the ledger returns)
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends

from ignite.api.dependencies import get_snapshot_repository
from ignite.core.errors import NotRegisteredError
from ignite.core.repository_protocols import SnapshotRepository
from ignite.schemas.participant import (
    DEFAULT_DISPLAY_NAME, ParticipantEnvelope, VerifyRequest,
)
from ignite.services.ignite_ledger import IgniteLedger, get_ledger
from ignite.services.ledger_persistence import persist_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/participants", tags=["participants"])


@router.post("/verify", response_model=ParticipantEnvelope)
async def verify_participant(
    body: VerifyRequest,
    background_tasks: BackgroundTasks,
    ledger: IgniteLedger = Depends(get_ledger),
    repository: SnapshotRepository | None = Depends(get_snapshot_repository),
):
    """Register a bridge-verified identity (idempotent)."""
    is_new = ledger.lookup(body.alien_id) is None
    participant = ledger.register(
        body.alien_id, body.display_name or DEFAULT_DISPLAY_NAME,
    )
    if is_new:
        background_tasks.add_task(persist_snapshot, ledger, repository)
    return {
        "user": participant.to_dict(),
        "stats": ledger.participant_stats(participant.id),
    }


@router.get("/{participant_id}", response_model=ParticipantEnvelope)
async def get_participant(
    participant_id: str, ledger: IgniteLedger = Depends(get_ledger),
):
    participant = ledger.lookup(participant_id)
    if participant is None:
        raise NotRegisteredError(participant_id)
    return {
        "user": participant.to_dict(),
        "stats": ledger.participant_stats(participant_id),
    }
