"""Services Layer — the stateful ledger, event fan-out, seeding and persistence.

Invariants:
    - IgniteLedger is the only object that mutates ledger state
    - Services never import from api/ (routes depend on services, not the reverse)
"""
