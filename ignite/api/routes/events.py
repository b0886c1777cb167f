"""Events — Server-Sent Events stream of ledger notifications.

Invariants:
    - Each line is `data: {"event": kind, "data": payload}`; kinds are participant_joined,
      spark_created, backing, spark_ignited
    - Heartbeat comment every sse_heartbeat_seconds keeps long-lived consumers alive
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from ignite.api.routes.event_stream_helpers import SSE_HEADERS, ledger_event_stream
from ignite.config import Settings, get_settings
from ignite.services.ignite_ledger import IgniteLedger, get_ledger

router = APIRouter(prefix="/api/v1", tags=["events"])


@router.get("/events")
async def stream_events(
    request: Request,
    ledger: IgniteLedger = Depends(get_ledger),
    settings: Settings = Depends(get_settings),
):
    """One-way real-time stream of ledger changes."""
    return StreamingResponse(
        ledger_event_stream(
            ledger.broadcaster, settings.sse_heartbeat_seconds,
            request.is_disconnected,
        ),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
