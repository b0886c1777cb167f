"""Demo Seed — fixture participants and sparks created through the public operations.

Invariants:
    - Only seeds an EMPTY ledger (never mixes fixtures into restored state)
    - Goes through register/create_spark/back_spark, so every ledger invariant holds
      afterwards (the "Community Garden" spark reaches quorum and ignites)
    - A rejected fixture operation is logged, never raised (seeding is best-effort)
"""

import logging

from ignite.core.errors import IgniteError
from ignite.services.ignite_ledger import IgniteLedger

logger = logging.getLogger(__name__)

DEMO_PARTICIPANTS: tuple[tuple[str, str], ...] = (
    ("alien_s01", "Nova"),
    ("alien_s02", "Kai"),
    ("alien_s03", "Sage"),
    ("alien_s04", "River"),
    ("alien_s05", "Ember"),
    ("alien_s06", "Atlas"),
)

# (creator, title, description, category, goal, [(backer, amount, note), ...])
DEMO_SPARKS: tuple[tuple, ...] = (
    (
        "alien_s01", "AI Music Video for Indie Artists",
        "Fund AI-generated music videos for 3 independent musicians who can't "
        "afford traditional production. Verified humans vote on which artists "
        "get selected.",
        "art", 25,
        [("alien_s02", 5, "Art needs to be accessible"),
         ("alien_s03", 8, "Love this idea!")],
    ),
    (
        "alien_s03", "Community Garden Drone Mapping",
        "Use AI + drone footage to map and optimize 5 community gardens in SF. "
        "All participants verified, no corporate astroturfing.",
        "cause", 15,
        [("alien_s01", 3, None), ("alien_s02", 3, None), ("alien_s04", 3, None)],
    ),
    (
        "alien_s05", "Open-Source AI Tutor for Kids",
        "Build a free AI tutoring app for underserved schools. Needs funding for "
        "API costs. Every backer is a verified human who believes in education equity.",
        "tech", 30,
        [("alien_s06", 8, "Education is everything")],
    ),
    (
        "alien_s04", "Neighborhood Skill-Share Platform",
        "Create a hyper-local platform where verified neighbors teach each other "
        "skills: cooking, coding, carpentry. Trust starts with real identity.",
        "community", 20,
        [("alien_s01", 5, None)],
    ),
)


def seed_demo_data(ledger: IgniteLedger) -> bool:
    """Seed fixtures into an empty ledger. Returns whether seeding happened."""
    if not ledger.is_empty:
        return False

    for participant_id, name in DEMO_PARTICIPANTS:
        ledger.register(participant_id, name)

    for creator, title, description, category, goal, backings in DEMO_SPARKS:
        spark = ledger.create_spark(creator, title, description, goal, category)
        if isinstance(spark, IgniteError):
            logger.warning(f"Demo spark '{title}' rejected: {spark.code}")
            continue
        for backer, amount, note in backings:
            result = ledger.back_spark(spark.id, backer, amount, note)
            if isinstance(result, IgniteError):
                logger.warning(f"Demo backing on '{title}' rejected: {result.code}")

    logger.info(
        f"Seeded demo data: {len(DEMO_PARTICIPANTS)} participants, "
        f"{len(DEMO_SPARKS)} sparks",
    )
    return True
