"""Participant Stats — pure computation of a participant's ledger summary.

Invariants:
    - All inputs come from LedgerState (no IO)
    - Returns a flat dict of integer counts (serializable as JSON)
    - Never raises — unknown participants get zeros
"""

from ignite.core.ledger_state import LedgerState


def compute_participant_stats(state: LedgerState, participant_id: str) -> dict:
    """Balance, sparks created, distinct sparks backed and tokens contributed."""
    own_backings = [b for b in state.backings if b.backer_id == participant_id]
    return {
        "balance": state.balances.get(participant_id, 0),
        "sparks_created": sum(
            1 for s in state.sparks.values() if s.creator_id == participant_id
        ),
        "sparks_backed": len({b.spark_id for b in own_backings}),
        "total_contributed": sum(b.amount for b in own_backings),
    }
