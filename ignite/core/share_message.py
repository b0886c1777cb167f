"""Share Message — pure text for the outbound SMS invite.

Invariants:
    - Inputs are plain snapshot fields; the ledger is never consulted
    - Backers still needed never goes below zero
"""

from ignite.core.ignition import backers_needed


def build_share_message(
    creator_name: str,
    spark_title: str,
    raised: int,
    goal: int,
    backer_count: int,
    quorum: int,
    spark_url: str,
) -> str:
    pct = round(raised / max(goal, 1) * 100)
    needed = backers_needed(backer_count, quorum)
    return (
        f'🔥 {creator_name} invited you to back "{spark_title}" on Ignite!\n\n'
        f"{pct}% funded · {backer_count} backers · Needs {needed} more to ignite\n\n"
        f"Verify as a real human and fund ideas that matter:\n{spark_url}"
    )


def build_spark_url(app_url: str, spark_id: str) -> str:
    return f"{app_url.rstrip('/')}?spark={spark_id}"
