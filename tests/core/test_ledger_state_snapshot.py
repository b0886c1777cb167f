"""LedgerState snapshot — JSON-safe serialization and reconstruction."""

import json

import pytest

from ignite.core.activity_feed import backing_item, spark_created_item
from ignite.core.domain_types import SparkStatus
from ignite.core.ledger_state import LedgerState
from ignite.core.ledger_state_snapshot import (
    ledger_state_from_snapshot, ledger_state_to_snapshot,
)
from ledger_builders import T0, make_backing, pledge


def test_snapshot_is_json_serializable(state):
    pledge(state, make_backing("b1", "s1", "bob", 3))
    json.dumps(ledger_state_to_snapshot(state))


def test_restored_state_matches_original(state):
    backing = make_backing("b1", "s1", "bob", 3, note="for the bees")
    pledge(state, backing)
    state.feed.append(spark_created_item("f_1", state.sparks["s1"]))
    state.feed.append(backing_item("f_2", backing))

    restored = ledger_state_from_snapshot(ledger_state_to_snapshot(state))

    assert restored.participants == state.participants
    assert restored.balances == state.balances
    assert restored.allocations == state.allocations
    assert restored.sparks == state.sparks
    assert restored.backings == state.backings
    assert restored.feed == state.feed


def test_status_and_ignition_time_survive(state):
    state.sparks["s1"].status = SparkStatus.IGNITED
    state.sparks["s1"].ignited_at = T0
    restored = ledger_state_from_snapshot(ledger_state_to_snapshot(state))
    assert restored.sparks["s1"].status == SparkStatus.IGNITED
    assert restored.sparks["s1"].ignited_at == T0


def test_empty_or_missing_snapshot_gives_empty_state():
    assert ledger_state_from_snapshot(None).is_empty
    assert ledger_state_from_snapshot({}).is_empty


def test_missing_required_field_raises_key_error():
    with pytest.raises(KeyError):
        ledger_state_from_snapshot({"participants": [{"id": "alice"}]})


def test_bad_status_raises_value_error(state):
    data = ledger_state_to_snapshot(state)
    data["sparks"][0]["status"] = "exploded"
    with pytest.raises(ValueError):
        ledger_state_from_snapshot(data)


def test_state_defaults():
    state = LedgerState()
    assert state.is_empty
    assert state.total_pledged == 0
    assert state.allocations == {}


def test_version_one_snapshot_has_no_allocations(state):
    data = ledger_state_to_snapshot(state)
    data["version"] = 1
    del data["allocations"]
    restored = ledger_state_from_snapshot(data)
    assert restored.allocations == {}
    assert restored.balances == state.balances


def test_list_where_mapping_expected_raises_attribute_error():
    with pytest.raises(AttributeError):
        ledger_state_from_snapshot({"balances": ["alice"]})
