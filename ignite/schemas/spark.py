"""Spark Schemas — request models for spark creation and backing, plus response shaping.

Invariants:
    - Strings are stripped; numeric POLICY bounds are NOT duplicated here — the ledger
      enforces them so clients see the ledger's typed error codes
    - creator_id/backer_id are stripped like alien_id, so they match the registered id
    - Only structural limits live here (max lengths, integer types)
    - spark_payload adds the derived USD goal and backer count to the spark dict
"""

from pydantic import BaseModel, Field, field_validator

from ignite.core.entities import Spark
from ignite.core.ledger_policy import LedgerPolicy
from ignite.schemas.participant import strip_display_name, strip_participant_id


class SparkCreate(BaseModel):
    """Spark creation request. display_name auto-registers an unknown creator."""
    creator_id: str = Field(min_length=1, max_length=128)
    display_name: str | None = Field(None, max_length=64)
    title: str = Field(max_length=200)
    description: str = Field(max_length=5_000)
    goal: int
    category: str | None = Field(None, max_length=32)

    @field_validator("creator_id")
    @classmethod
    def strip_creator_id(cls, v: str) -> str:
        return strip_participant_id(v, "creator_id")

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("display_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_display_name(v)


class BackingCreate(BaseModel):
    """Backing request. payment_ref is the opaque reference from the payment bridge."""
    backer_id: str = Field(min_length=1, max_length=128)
    display_name: str | None = Field(None, max_length=64)
    amount: int
    note: str | None = Field(None, max_length=500)
    payment_ref: str | None = Field(None, max_length=256)

    @field_validator("backer_id")
    @classmethod
    def strip_backer_id(cls, v: str) -> str:
        return strip_participant_id(v, "backer_id")

    @field_validator("note")
    @classmethod
    def strip_note(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("display_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_display_name(v)


def spark_payload(spark: Spark, policy: LedgerPolicy) -> dict:
    return {
        **spark.to_dict(),
        "backer_count": spark.backer_count,
        "goal_usd": policy.goal_in_usd(spark.goal),
    }
