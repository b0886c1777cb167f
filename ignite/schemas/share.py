"""Share Schemas — invite SMS request.

Invariants:
    - Spark fields arrive as plain snapshot data; the ledger is not consulted
    - phone is E.164-ish: optional +, 7-15 digits
"""

from pydantic import BaseModel, Field


class ShareRequest(BaseModel):
    phone: str = Field(pattern=r"^\+?[0-9]{7,15}$")
    spark_id: str = Field(min_length=1, max_length=128)
    spark_title: str = Field(min_length=1, max_length=200)
    creator_name: str = Field(min_length=1, max_length=64)
    raised: int = Field(ge=0)
    goal: int = Field(ge=1)
    backer_count: int = Field(ge=0)
