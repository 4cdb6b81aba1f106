import httpx

from relay.models.webhook_payload import WebhookPayload
from relay.utils.logger import logger


async def read_body(response: httpx.Response) -> str:
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError) as e:
        logger.debug(f"Unable to read webhook response body: {e!r}")
        return ""


class WebhookClient:
    """Posts relay payloads to a single webhook URL.

    Non-2xx responses are logged and reported as ``False``; the response
    body is only read for that log line, and an unreadable body is logged
    as empty. Transport errors on the request itself (``httpx.HTTPError``)
    are left to the caller. Nothing is retried.
    """

    def __init__(self, url: str, client: httpx.AsyncClient | None = None) -> None:
        self.url = url
        self.client = client or httpx.AsyncClient()

    async def post(self, payload: WebhookPayload) -> bool:
        async with self.client.stream(
            "POST",
            self.url,
            json=payload.to_dict(),
            headers={"content-type": "application/json"},
        ) as response:
            if not response.is_success:
                body = await read_body(response)
                logger.error(f"Webhook call failed: {response.status_code} {body}")
                return False

        logger.info(
            f"Triggered webhook for emoji '{payload.event.emoji_key}' "
            f"on message {payload.event.message.id}."
        )
        return True

    async def close(self) -> None:
        await self.client.aclose()
