"""Token Ledger — per-participant integer balances in a closed economy.

Invariants:
    - Balances are never negative: debit is all-or-nothing
    - The registration grant is the only credit; there is no transfer or top-up
    - Every grant is recorded in allocations alongside the balance it created
    - Unknown identities read as balance 0

Design Decisions:
    - Wraps the LedgerState.balances/allocations dicts instead of owning copies, so
      snapshots and audits see exactly what the ledger enforces
    - No locking here: IgniteLedger calls it inside its critical section
"""

from ignite.core.enforce_backing import check_funds
from ignite.core.errors import InsufficientFundsError


class TokenLedger:
    def __init__(
        self, balances: dict[str, int], allocations: dict[str, int] | None = None,
    ):
        self._balances = balances
        self._allocations = allocations if allocations is not None else {}

    def balance_of(self, participant_id: str) -> int:
        return self._balances.get(participant_id, 0)

    def allocation_of(self, participant_id: str) -> int:
        return self._allocations.get(participant_id, 0)

    def grant_initial(self, participant_id: str, amount: int) -> None:
        """One-time registration allocation; ignored if a balance already exists."""
        if participant_id in self._balances:
            return
        self._balances[participant_id] = amount
        self._allocations[participant_id] = amount

    def debit(self, participant_id: str, amount: int) -> InsufficientFundsError | None:
        if amount < 0:
            raise ValueError("debit amount must be non-negative")
        error = check_funds(self._balances, participant_id, amount)
        if error or amount == 0:
            return error
        self._balances[participant_id] -= amount
        return None
