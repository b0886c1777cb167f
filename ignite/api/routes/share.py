"""Share — sends a spark invite by SMS.

Invariants:
    - Independent of the ledger: the request carries the spark snapshot fields
    - Missing Twilio credentials answer 503 SMS_NOT_CONFIGURED before any network call

Design Decisions:
    - get_sms_sender as a dependency: tests override it with a fake sender
    - Singleton TwilioSmsClient reuses one httpx connection pool across requests
"""

import logging

from fastapi import APIRouter, Depends

from ignite.config import Settings, get_settings
from ignite.core.errors import SmsNotConfiguredError
from ignite.core.repository_protocols import SmsSender
from ignite.core.share_message import build_share_message, build_spark_url
from ignite.infrastructure.sms_client import TwilioSmsClient
from ignite.schemas.share import ShareRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["share"])

_sms_client: TwilioSmsClient | None = None


def get_sms_sender(settings: Settings = Depends(get_settings)) -> SmsSender:
    global _sms_client
    if not settings.sms_configured:
        raise SmsNotConfiguredError()
    if _sms_client is None:
        _sms_client = TwilioSmsClient(
            account_sid=settings.twilio_account_sid,
            api_key=settings.twilio_api_key,
            api_secret=settings.twilio_api_secret,
            from_number=settings.twilio_phone_number,
        )
    return _sms_client


async def close_sms_client() -> None:
    global _sms_client
    if _sms_client is not None:
        await _sms_client.aclose()
        _sms_client = None


@router.post("/share")
async def share_spark(
    body: ShareRequest,
    sender: SmsSender = Depends(get_sms_sender),
    settings: Settings = Depends(get_settings),
):
    message = build_share_message(
        creator_name=body.creator_name,
        spark_title=body.spark_title,
        raised=body.raised,
        goal=body.goal,
        backer_count=body.backer_count,
        quorum=settings.ignite_quorum,
        spark_url=build_spark_url(settings.public_app_url, body.spark_id),
    )
    sid = await sender.send(body.phone, message)
    return {"success": True, "message_sid": sid}
