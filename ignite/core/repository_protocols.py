"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the ledger itself stays synchronous and
      the shell orchestrates the async calls around it
"""

from typing import Protocol


class SnapshotRepository(Protocol):
    """Contract for best-effort ledger snapshot persistence — implemented by shell."""
    async def save(self, snapshot: dict) -> None: ...
    async def load_latest(self) -> dict | None: ...


class SmsSender(Protocol):
    """Contract for the outbound SMS channel — implemented by shell."""
    async def send(self, to: str, body: str) -> str: ...
