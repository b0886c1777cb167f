"""Backing Enforcement — validates a back_spark request before any ledger mutation.

Invariants:
    - validate_backing is PURE: returns an error instance or None, never mutates state
    - Order: backer registered -> spark exists -> spark active -> not self-backing
      -> amount within pledge bounds -> balance covers amount
    - A spark that is not ACTIVE never accepts pledges (ignition is terminal)
"""

from ignite.core.errors import (
    ErrorContext,
    IgniteError,
    InsufficientFundsError,
    NotRegisteredError,
    PolicyValidationError,
    SelfBackingForbiddenError,
    SparkNotActiveError,
    SparkNotFoundError,
)
from ignite.core.ledger_policy import LedgerPolicy
from ignite.core.ledger_state import LedgerState


def validate_backing(
    state: LedgerState,
    policy: LedgerPolicy,
    spark_id: str,
    backer_id: str,
    amount: int,
) -> IgniteError | None:
    if backer_id not in state.participants:
        return NotRegisteredError(backer_id)

    spark = state.sparks.get(spark_id)
    if spark is None:
        return SparkNotFoundError(spark_id)
    if not spark.is_active:
        return SparkNotActiveError(spark_id)

    ctx = ErrorContext(participant_id=backer_id, spark_id=spark_id)
    if spark.creator_id == backer_id:
        return SelfBackingForbiddenError(ctx)

    valid_amount = isinstance(amount, int) and not isinstance(amount, bool)
    if not valid_amount or not policy.pledge_min <= amount <= policy.pledge_max:
        return PolicyValidationError(
            f"Amount must be {policy.pledge_min}-{policy.pledge_max}", "amount", ctx,
        )
    return check_funds(state.balances, backer_id, amount, ctx)


def check_funds(
    balances: dict[str, int], participant_id: str, amount: int,
    context: ErrorContext | None = None,
) -> InsufficientFundsError | None:
    """Balance must cover the full amount — debits are all-or-nothing."""
    balance = balances.get(participant_id, 0)
    if balance < amount:
        return InsufficientFundsError(
            balance, amount, context or ErrorContext(participant_id=participant_id),
        )
    return None
