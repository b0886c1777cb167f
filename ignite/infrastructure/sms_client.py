"""Twilio SMS Client — sends invite messages through the Twilio Messages REST API.

Invariants:
    - Authenticates with an API key/secret pair (HTTP basic auth), never the auth token
    - Non-2xx responses map to SmsDeliveryError carrying the provider's message
    - Transport failures (timeouts, connection errors) map to SmsDeliveryError too
    - Returns the provider message SID on success

Design Decisions:
    - httpx.AsyncClient injectable: tests pass an httpx.MockTransport-backed client
    - No retry: an invite is user-triggered, the user can resend
"""

import logging

import httpx

from ignite.core.errors import SmsDeliveryError, SmsNotConfiguredError

logger = logging.getLogger(__name__)

TWILIO_API_BASE = "https://api.twilio.com/2010-04-01"


class TwilioSmsClient:
    def __init__(
        self,
        account_sid: str,
        api_key: str,
        api_secret: str,
        from_number: str,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 10.0,
    ):
        if not all((account_sid, api_key, api_secret, from_number)):
            raise SmsNotConfiguredError()
        self.account_sid = account_sid
        self.from_number = from_number
        self._auth = httpx.BasicAuth(api_key, api_secret)
        self._client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    @property
    def messages_url(self) -> str:
        return f"{TWILIO_API_BASE}/Accounts/{self.account_sid}/Messages.json"

    async def send(self, to: str, body: str) -> str:
        try:
            response = await self._client.post(
                self.messages_url,
                auth=self._auth,
                data={"To": to, "From": self.from_number, "Body": body},
            )
        except httpx.HTTPError as e:
            logger.error(f"Twilio request failed: {e!r}")
            raise SmsDeliveryError("SMS failed") from e

        payload = _json_or_empty(response)
        if response.is_error:
            logger.error(
                f"Twilio error {response.status_code}: {payload.get('message')}",
            )
            raise SmsDeliveryError(
                payload.get("message") or "SMS failed",
                status_code=response.status_code,
            )
        sid = payload.get("sid", "")
        logger.info("Invite SMS sent", extra={"message_sid": sid})
        return sid

    async def aclose(self) -> None:
        await self._client.aclose()


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
