"""Share route — SMS invite through an injectable sender."""

import pytest

from ignite.api.routes.share import get_sms_sender
from ignite.core.errors import SmsDeliveryError
from ignite.main import app

SHARE_BODY = {
    "phone": "+15552223333",
    "spark_id": "spark_1",
    "spark_title": "Community Garden",
    "creator_name": "Nova",
    "raised": 10,
    "goal": 20,
    "backer_count": 1,
}


class _FakeSender:
    def __init__(self, error=None):
        self.sent = []
        self.error = error

    async def send(self, to, body):
        if self.error:
            raise self.error
        self.sent.append((to, body))
        return "SM123"


@pytest.fixture
def sender():
    fake = _FakeSender()
    app.dependency_overrides[get_sms_sender] = lambda: fake
    return fake


async def test_share_sends_invite(client, sender):
    res = await client.post("/api/v1/share", json=SHARE_BODY)
    assert res.status_code == 200
    assert res.json() == {"success": True, "message_sid": "SM123"}
    to, body = sender.sent[0]
    assert to == "+15552223333"
    assert "Needs 2 more to ignite" in body
    assert body.endswith("https://ignite.example?spark=spark_1")


async def test_share_without_credentials_is_503(client):
    res = await client.post("/api/v1/share", json=SHARE_BODY)
    assert res.status_code == 503
    assert res.json()["error"]["code"] == "SMS_NOT_CONFIGURED"


async def test_share_provider_failure_is_502(client):
    fake = _FakeSender(error=SmsDeliveryError("Invalid 'To' number", 400))
    app.dependency_overrides[get_sms_sender] = lambda: fake
    res = await client.post("/api/v1/share", json=SHARE_BODY)
    assert res.status_code == 502
    assert res.json()["error"]["message"] == "Invalid 'To' number"


async def test_share_rejects_bad_phone(client, sender):
    res = await client.post("/api/v1/share", json={**SHARE_BODY, "phone": "call me"})
    assert res.status_code == 400
    assert sender.sent == []
