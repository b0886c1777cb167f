"""Core test fixtures — pure LedgerState builders, no ledger service, no IO."""

import pytest

from ignite.core.ledger_policy import LedgerPolicy
from ignite.core.ledger_state import LedgerState
from ledger_builders import add_participant, make_spark


@pytest.fixture
def policy():
    return LedgerPolicy()


@pytest.fixture
def state():
    """alice, bob, carol registered with 10 tokens; one ACTIVE spark s1 by alice."""
    s = LedgerState()
    for pid in ("alice", "bob", "carol"):
        add_participant(s, pid)
    s.sparks["s1"] = make_spark()
    return s
