"""Event Broadcaster — subscription handles, ordered fan-out, failure removal."""

import logging

from ignite.core.domain_types import EventKind
from ignite.services.event_broadcaster import EventBroadcaster


def test_notify_reaches_listeners_in_subscription_order():
    broadcaster = EventBroadcaster()
    calls = []
    broadcaster.subscribe(lambda kind, data: calls.append(("first", kind, data)))
    broadcaster.subscribe(lambda kind, data: calls.append(("second", kind, data)))

    broadcaster.notify(EventKind.BACKING, {"amount": 3})

    assert calls == [
        ("first", "backing", {"amount": 3}),
        ("second", "backing", {"amount": 3}),
    ]


def test_unsubscribe_is_idempotent():
    broadcaster = EventBroadcaster()
    unsubscribe = broadcaster.subscribe(lambda kind, data: None)
    assert unsubscribe() is True
    assert unsubscribe() is False
    assert broadcaster.listener_count == 0


def test_same_callable_subscribed_twice_gets_two_handles():
    broadcaster = EventBroadcaster()
    calls = []

    def listener(kind, data):
        calls.append(kind)

    first = broadcaster.subscribe(listener)
    broadcaster.subscribe(listener)
    first()
    broadcaster.notify(EventKind.SPARK_CREATED, {})
    assert calls == ["spark_created"]


def test_failing_listener_is_removed_and_others_still_called(caplog):
    broadcaster = EventBroadcaster()
    calls = []

    def broken(kind, data):
        raise RuntimeError("gone")

    broadcaster.subscribe(broken)
    broadcaster.subscribe(lambda kind, data: calls.append(kind))

    with caplog.at_level(logging.WARNING):
        broadcaster.notify(EventKind.PARTICIPANT_JOINED, {})
    broadcaster.notify(EventKind.PARTICIPANT_JOINED, {})

    assert calls == ["participant_joined", "participant_joined"]
    assert broadcaster.listener_count == 1
    assert "Listener failed" in caplog.text


def test_listener_may_unsubscribe_itself_mid_delivery():
    broadcaster = EventBroadcaster()
    calls = []
    handles = {}

    def once(kind, data):
        calls.append("once")
        handles["once"]()

    handles["once"] = broadcaster.subscribe(once)
    broadcaster.subscribe(lambda kind, data: calls.append("steady"))

    broadcaster.notify(EventKind.BACKING, {})
    broadcaster.notify(EventKind.BACKING, {})

    assert calls == ["once", "steady", "steady"]


def test_listener_removed_mid_delivery_is_skipped():
    broadcaster = EventBroadcaster()
    calls = []
    handles = {}

    def remover(kind, data):
        calls.append("remover")
        handles["victim"]()

    broadcaster.subscribe(remover)
    handles["victim"] = broadcaster.subscribe(lambda kind, data: calls.append("victim"))

    broadcaster.notify(EventKind.BACKING, {})
    assert calls == ["remover"]


def test_notify_without_listeners_is_noop():
    EventBroadcaster().notify(EventKind.SPARK_IGNITED, {"id": "s1"})
