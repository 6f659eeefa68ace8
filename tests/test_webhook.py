import json

import httpx
import pytest

import config
from models import WebhookRecord
from webhook import WebhookError, send_to_webhook

HOOK_URL = "https://hooks.test/automation"


def make_record(**overrides):
    values = dict(
        product_name="FieldSense",
        target_audience="independent farm managers",
        pain_points="guesswork",
        benefit="see every field before sunrise",
        competitors="Acme Agro",
        differentiators="satellite data",
        positioning_statement="P",
        uvp="U",
        tagline="Decide with daylight / Every acre accounted / Figures before footsteps",
    )
    values.update(overrides)
    return WebhookRecord(**values)


def client_for(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_posts_record_as_json():
    seen = []

    def handler(request):
        seen.append((request.method, str(request.url), json.loads(request.content)))
        return httpx.Response(200, text="Accepted")

    send_to_webhook(make_record(), url=HOOK_URL, client=client_for(handler))

    method, url, body = seen[0]
    assert method == "POST"
    assert url == HOOK_URL
    assert body["benefit"] == "see every field before sunrise"
    assert body["positioning_statement"] == "P"
    assert set(body) == set(WebhookRecord.model_fields)


def test_non_2xx_raises():
    with pytest.raises(WebhookError, match="Failed to send data"):
        send_to_webhook(make_record(), url=HOOK_URL, client=client_for(lambda r: httpx.Response(500)))


def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(WebhookError):
        send_to_webhook(make_record(), url=HOOK_URL, client=client_for(handler))


def test_incomplete_record_is_not_sent():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(WebhookError, match="generate positioning outputs first"):
        send_to_webhook(make_record(tagline=""), url=HOOK_URL, client=client_for(handler))
    assert calls == []


def test_missing_url_raises(monkeypatch):
    monkeypatch.setattr(config, "WEBHOOK_URL", "")
    with pytest.raises(WebhookError, match="WEBHOOK_URL is not configured"):
        send_to_webhook(make_record())
