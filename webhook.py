import logging
from typing import Optional

import httpx

import config
from models import WebhookRecord

logger = logging.getLogger(__name__)


class WebhookError(Exception):
    pass


def send_to_webhook(
    record: WebhookRecord,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> None:
    """POST the full positioning record as JSON to the automation webhook."""
    url = url or config.WEBHOOK_URL
    if not url:
        raise WebhookError("WEBHOOK_URL is not configured")
    if not record.is_complete():
        raise WebhookError("Please generate positioning outputs first")

    payload = record.model_dump()
    try:
        if client is not None:
            response = client.post(url, json=payload, timeout=timeout or config.WEBHOOK_TIMEOUT)
        else:
            response = httpx.post(url, json=payload, timeout=timeout or config.WEBHOOK_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Webhook rejected record: status %s", e.response.status_code)
        raise WebhookError("Failed to send data") from e
    except httpx.HTTPError as e:
        logger.error("Error sending to webhook: %s", e)
        raise WebhookError("Failed to send data") from e

    logger.info("Sent positioning record for %s to webhook", record.product_name)
