"""Token ledger — registration grant, all-or-nothing debit, zero default."""

import pytest

from ignite.core.errors import InsufficientFundsError
from ignite.core.token_ledger import TokenLedger


def test_unknown_identity_has_zero_balance():
    assert TokenLedger({}).balance_of("nobody") == 0


def test_grant_initial_sets_balance():
    tokens = TokenLedger({})
    tokens.grant_initial("alice", 10)
    assert tokens.balance_of("alice") == 10


def test_grant_initial_is_one_time():
    tokens = TokenLedger({"alice": 4})
    tokens.grant_initial("alice", 10)
    assert tokens.balance_of("alice") == 4


def test_debit_reduces_balance():
    tokens = TokenLedger({"alice": 10})
    assert tokens.debit("alice", 7) is None
    assert tokens.balance_of("alice") == 3


def test_debit_whole_balance_reaches_zero():
    tokens = TokenLedger({"alice": 10})
    assert tokens.debit("alice", 10) is None
    assert tokens.balance_of("alice") == 0


def test_overdraft_rejected_and_balance_unchanged():
    tokens = TokenLedger({"alice": 3})
    error = tokens.debit("alice", 4)
    assert isinstance(error, InsufficientFundsError)
    assert tokens.balance_of("alice") == 3


def test_zero_debit_of_unknown_identity_is_noop():
    balances = {}
    assert TokenLedger(balances).debit("ghost", 0) is None
    assert balances == {}


def test_negative_debit_is_programming_error():
    with pytest.raises(ValueError):
        TokenLedger({"alice": 10}).debit("alice", -1)


def test_wraps_shared_dict():
    balances = {"alice": 10}
    TokenLedger(balances).debit("alice", 2)
    assert balances["alice"] == 8


def test_grant_initial_records_allocation():
    allocations = {}
    tokens = TokenLedger({}, allocations)
    tokens.grant_initial("alice", 10)
    tokens.debit("alice", 4)
    assert allocations == {"alice": 10}
    assert tokens.allocation_of("alice") == 10


def test_repeat_grant_keeps_first_allocation():
    tokens = TokenLedger({}, {})
    tokens.grant_initial("alice", 10)
    tokens.grant_initial("alice", 25)
    assert tokens.allocation_of("alice") == 10
