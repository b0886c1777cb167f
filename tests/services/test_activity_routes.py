"""Activity routes — feed, graph and insights are read-only derivations."""

import pytest


@pytest.fixture
def busy_ledger(ledger):
    for pid in ("alice", "bob", "carol"):
        ledger.register(pid, pid.title())
    spark = ledger.create_spark("alice", "Community Garden", "Plant vegetables together", 20)
    ledger.back_spark(spark.id, "bob", 3)
    ledger.back_spark(spark.id, "bob", 4)
    ledger.back_spark(spark.id, "carol", 1)
    return ledger


async def test_feed_newest_first(client, busy_ledger):
    res = await client.get("/api/v1/feed")
    assert res.status_code == 200
    feed = res.json()["feed"]
    assert [f["type"] for f in feed] == ["backing", "backing", "backing", "spark_created"]
    assert feed[0]["actor_name"] == "Carol"


async def test_feed_limit(client, busy_ledger):
    res = await client.get("/api/v1/feed", params={"limit": 2})
    assert len(res.json()["feed"]) == 2


async def test_feed_limit_clamped_to_max(client, ledger):
    ledger.register("alice", "Alice")
    for i in range(60):
        ledger.create_spark("alice", f"Spark {i:02d}", "A spark worth funding", 10)
    res = await client.get("/api/v1/feed", params={"limit": 500})
    assert len(res.json()["feed"]) == 50


async def test_feed_rejects_zero_limit(client):
    res = await client.get("/api/v1/feed", params={"limit": 0})
    assert res.status_code == 400


async def test_graph(client, busy_ledger):
    res = await client.get("/api/v1/graph")
    assert res.status_code == 200
    graph = res.json()
    assert {n["type"] for n in graph["nodes"]} == {"user", "spark"}
    assert len(graph["nodes"]) == 4
    bob_links = [l for l in graph["links"] if l["source"] == "bob"]
    assert sorted(l["amount"] for l in bob_links) == [3, 4]
    user = next(n for n in graph["nodes"] if n["id"] == "bob")
    assert "raised" not in user


async def test_insights(client, busy_ledger):
    res = await client.get("/api/v1/insights")
    assert res.status_code == 200
    body = res.json()
    assert body["insights"][0]["type"] == "almost_ignited"
    assert body["trend_direction"] == "stable"
    assert 0 <= body["community_score"] <= 100


async def test_reads_do_not_mutate(client, busy_ledger):
    before = busy_ledger.to_snapshot()
    await client.get("/api/v1/feed")
    await client.get("/api/v1/graph")
    await client.get("/api/v1/insights")
    assert busy_ledger.to_snapshot() == before
