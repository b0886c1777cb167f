"""Core Layer — pure ledger logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and derivation functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: services/ignite_ledger.py is the
      single stateful object that applies core decisions under a lock
"""
