"""Event Stream Helpers — bridges the synchronous broadcaster onto an async SSE stream.

Invariants:
    - One broadcaster subscription per open stream, removed when the stream ends
      (client disconnect, cancellation, or generator close)
    - Each stream sees ledger events in the order they were produced
    - A heartbeat comment is emitted whenever no event arrived for heartbeat_seconds

Design Decisions:
    - Listener hands events over with loop.call_soon_threadsafe: notify() may run on any
      thread, the queue belongs to the event loop. A closed loop makes the listener raise,
      which the broadcaster answers by unsubscribing it
    - SSE comment (": heartbeat") over a data event: EventSource ignores comments
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from ignite.services.event_broadcaster import EventBroadcaster

logger = logging.getLogger(__name__)

# ADR: SSE headers prevent proxy/browser buffering of streamed events.
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}

HEARTBEAT_LINE = ": heartbeat\n\n"


def sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


async def ledger_event_stream(
    broadcaster: EventBroadcaster,
    heartbeat_seconds: float,
    is_disconnected: Callable[[], Awaitable[bool]],
) -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    queue: asyncio.Queue[tuple[str, dict]] = asyncio.Queue()

    def enqueue(event_kind: str, payload: dict) -> None:
        loop.call_soon_threadsafe(queue.put_nowait, (event_kind, payload))

    unsubscribe = broadcaster.subscribe(enqueue)
    try:
        while not await is_disconnected():
            try:
                event_kind, payload = await asyncio.wait_for(
                    queue.get(), timeout=heartbeat_seconds,
                )
            except asyncio.TimeoutError:
                yield HEARTBEAT_LINE
                continue
            yield sse_line({"event": event_kind, "data": payload})
    except asyncio.CancelledError:
        logger.info("Client disconnected from event stream")
        raise
    finally:
        unsubscribe()
