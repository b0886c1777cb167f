"""Participant Schemas — Pydantic models for identity registration at the API boundary.

Invariants:
    - alien_id: 1-128 chars, stripped, non-empty (issued by the proof-of-humanity bridge)
    - display_name: optional, stripped, defaults to "Human" when blank
"""

from pydantic import BaseModel, Field, field_validator

DEFAULT_DISPLAY_NAME = "Human"


def strip_participant_id(v: str, field_name: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


def strip_display_name(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None


class VerifyRequest(BaseModel):
    """Registration request — identity already verified by the external bridge."""
    alien_id: str = Field(min_length=1, max_length=128)
    display_name: str | None = Field(None, max_length=64)

    @field_validator("alien_id")
    @classmethod
    def strip_alien_id(cls, v: str) -> str:
        return strip_participant_id(v, "alien_id")

    @field_validator("display_name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return strip_display_name(v)


class ParticipantStats(BaseModel):
    balance: int
    sparks_created: int
    sparks_backed: int
    total_contributed: int


class ParticipantResponse(BaseModel):
    id: str
    display_name: str
    verified: bool
    created_at: str


class ParticipantEnvelope(BaseModel):
    """Participant plus ledger stats — returned by verify and lookup."""
    user: ParticipantResponse
    stats: ParticipantStats
