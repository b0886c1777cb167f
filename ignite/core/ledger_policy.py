"""Ledger Policy — the tunable bounds and heuristics the core enforces.

Invariants:
    - Frozen: a policy never changes for the lifetime of an IgniteLedger
    - goal_min <= goal_max and pledge_min <= pledge_max (checked in __post_init__)

Design Decisions:
    - Separate from Settings: the core never imports pydantic-settings; the shell
      converts Settings into a LedgerPolicy (ADR: dependency arrows point inward)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerPolicy:
    initial_balance: int = 10
    ignite_quorum: int = 3
    title_min_length: int = 3
    description_min_length: int = 10
    goal_min: int = 5
    goal_max: int = 100
    pledge_min: int = 1
    pledge_max: int = 10
    token_usd_rate: float = 1.0

    # Insight heuristics (advisory)
    insight_limit: int = 5
    momentum_active_bonus: int = 10
    trend_rising_above: int = 5
    trend_stable_above: int = 2

    def __post_init__(self):
        if self.goal_min > self.goal_max:
            raise ValueError("goal_min must not exceed goal_max")
        if self.pledge_min > self.pledge_max:
            raise ValueError("pledge_min must not exceed pledge_max")
        if self.ignite_quorum < 1:
            raise ValueError("ignite_quorum must be at least 1")

    def goal_in_usd(self, goal: int) -> float:
        return round(goal * self.token_usd_rate, 2)
