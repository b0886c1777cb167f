"""Event Broadcaster — synchronous publish/subscribe fan-out of ledger events.

Invariants:
    - subscribe() returns an idempotent unsubscribe callable
    - notify() calls every listener synchronously, in subscription order
    - A listener that raises is logged and unregistered; delivery to the rest continues
    - Delivery iterates over a copy of the registry, so listeners may unsubscribe
      themselves (or others) mid-delivery without corrupting the iteration

Design Decisions:
    - Handle-keyed dict over a set of callables: the same function can be subscribed
      twice and each subscription is removed independently
    - threading.Lock guards the registry only; listeners run outside it
"""

import itertools
import logging
import threading
from collections.abc import Callable
from functools import partial

from ignite.core.domain_types import EventKind

logger = logging.getLogger(__name__)

Listener = Callable[[str, dict], None]


class EventBroadcaster:
    def __init__(self):
        self._listeners: dict[int, Listener] = {}
        self._handles = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], bool]:
        """Register a listener. The returned callable unsubscribes it."""
        with self._lock:
            handle = next(self._handles)
            self._listeners[handle] = listener
        return partial(self._unsubscribe, handle)

    def _unsubscribe(self, handle: int) -> bool:
        with self._lock:
            return self._listeners.pop(handle, None) is not None

    def notify(self, event_kind: EventKind, payload: dict) -> None:
        with self._lock:
            registered = list(self._listeners.items())

        for handle, listener in registered:
            with self._lock:
                if handle not in self._listeners:
                    continue
            try:
                listener(event_kind.value, payload)
            except Exception:
                logger.warning(
                    "Listener failed, unsubscribing",
                    extra={"event_kind": event_kind.value}, exc_info=True,
                )
                self._unsubscribe(handle)
