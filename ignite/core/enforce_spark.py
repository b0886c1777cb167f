"""Spark Creation Enforcement — validates a create_spark request against registry and policy.

Invariants:
    - validate_spark_creation is PURE: returns an error instance or None, never mutates state
    - Checks run in a fixed order and short-circuit on the first failure:
      creator registered -> title length -> description length -> goal range
    - Category never fails validation (unrecognized values coerce to OTHER)

Design Decisions:
    - Returned error over raised error: the ledger hands the instance back as the
      operation result (ADR: failed operations leave no partial state)
"""

from ignite.core.errors import (
    ErrorContext, IgniteError, NotRegisteredError, PolicyValidationError,
)
from ignite.core.ledger_policy import LedgerPolicy
from ignite.core.ledger_state import LedgerState


def validate_spark_creation(
    state: LedgerState,
    policy: LedgerPolicy,
    creator_id: str,
    title: str | None,
    description: str | None,
    goal: int,
) -> IgniteError | None:
    if creator_id not in state.participants:
        return NotRegisteredError(creator_id)

    ctx = ErrorContext(participant_id=creator_id)
    if not title or len(title) < policy.title_min_length:
        return PolicyValidationError("Title too short", "title", ctx)
    if not description or len(description) < policy.description_min_length:
        return PolicyValidationError("Description too short", "description", ctx)
    if not _is_int(goal) or not policy.goal_min <= goal <= policy.goal_max:
        return PolicyValidationError(
            f"Goal must be {policy.goal_min}-{policy.goal_max} tokens", "goal", ctx,
        )
    return None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
