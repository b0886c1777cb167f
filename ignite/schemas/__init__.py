"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate structure at the system boundary; ledger policy is enforced by the core
    - Enum-valued response fields use Literal types matching the core enums

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are ledger state
"""
