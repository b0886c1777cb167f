"""Graph Schemas — Pydantic models for the relationship graph and insights responses.

Invariants:
    - GraphData shape matches the force-graph front end ({nodes, links})
    - Node type is "user" or "spark"; spark-only and user-only fields are optional

Design Decisions:
    - Response models over raw dicts: the OpenAPI schema documents the graph shape
      for the front end
"""

from typing import Literal

from pydantic import BaseModel


class GraphNode(BaseModel):
    id: str
    name: str
    type: Literal["user", "spark"]
    total_activity: int
    raised: int | None = None
    goal: int | None = None
    status: str | None = None
    verified: bool | None = None


class GraphLink(BaseModel):
    source: str
    target: str
    amount: int
    created_at: str


class GraphData(BaseModel):
    nodes: list[GraphNode] = []
    links: list[GraphLink] = []


class Insight(BaseModel):
    id: str
    type: Literal["almost_ignited", "new_spark"]
    message: str
    confidence: float
    spark_id: str | None = None
    created_at: str


class InsightSummary(BaseModel):
    insights: list[Insight] = []
    last_analysis: str
    community_score: int
    trend_direction: Literal["rising", "stable", "falling"]
