import pytest

import gpt_engine
from backend import app as app_module
from models import PositioningResult
from webhook import WebhookError

RESULT = PositioningResult(
    positioning="For farm managers tired of guessing, it delivers dawn-fresh field data.",
    uvp="See every field before sunrise.",
    tagline="Decide with daylight / Every acre accounted / Figures before footsteps",
    insights="Lead with clarity.",
)


@pytest.fixture
def client():
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_preflight(client):
    resp = client.options("/generate_positioning")
    assert resp.status_code == 204


def test_generate_success(client, positioning_payload, monkeypatch):
    seen = {}

    def fake_generate(inputs):
        seen["inputs"] = inputs
        return RESULT

    monkeypatch.setattr(app_module, "generate_positioning_outputs", fake_generate)
    resp = client.post("/generate_positioning", json=positioning_payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "success"
    assert body["tagline"] == RESULT.tagline
    assert body["uvp"] == RESULT.uvp
    assert seen["inputs"].product_name == "FieldSense"


def test_generate_missing_product_name(client, positioning_payload):
    resp = client.post("/generate_positioning", json=dict(positioning_payload, productName=""))
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Please enter a product name"


def test_generate_missing_fields(client):
    resp = client.post("/generate_positioning", json={"productName": "FieldSense"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Please fill in all fields"


@pytest.mark.parametrize("error_cls, status", [
    (gpt_engine.RateLimitedError, 429),
    (gpt_engine.PaymentRequiredError, 402),
    (gpt_engine.GatewayTimeoutError, 504),
    (gpt_engine.GatewayError, 502),
])
def test_generate_gateway_errors(client, positioning_payload, monkeypatch, error_cls, status):
    def fail(inputs):
        raise error_cls()

    monkeypatch.setattr(app_module, "generate_positioning_outputs", fail)
    resp = client.post("/generate_positioning", json=positioning_payload)

    assert resp.status_code == status
    body = resp.get_json()
    assert body["status"] == "error"
    assert body["error"] == error_cls.message


def test_generate_unexpected_error(client, positioning_payload, monkeypatch):
    def fail(inputs):
        raise RuntimeError("LLM_API_KEY is not configured")

    monkeypatch.setattr(app_module, "generate_positioning_outputs", fail)
    resp = client.post("/generate_positioning", json=positioning_payload)

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["error"] == "Unexpected server error."
    assert body["details"] == "LLM_API_KEY is not configured"


def test_generate_end_to_end_with_fake_gateway(client, positioning_payload, fake_gateway):
    fake_gateway(lambda kind, attempt: "Decide with daylight; Every acre accounted; Figures before footsteps")

    resp = client.post("/generate_positioning", json=positioning_payload)

    assert resp.status_code == 200
    assert resp.get_json()["tagline"] == "Decide with daylight / Every acre accounted / Figures before footsteps"


def test_send_to_webhook_requires_outputs(client, positioning_payload):
    resp = client.post("/send_to_webhook", json=positioning_payload)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Please generate positioning outputs first"


def test_send_to_webhook_success(client, positioning_payload, monkeypatch):
    sent = []
    monkeypatch.setattr(app_module, "send_to_webhook", sent.append)
    payload = dict(positioning_payload, positioning=RESULT.positioning, uvp=RESULT.uvp, tagline=RESULT.tagline)

    resp = client.post("/send_to_webhook", json=payload)

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "success"}
    assert sent[0].benefit == "see every field before sunrise"
    assert sent[0].positioning_statement == RESULT.positioning


def test_send_to_webhook_failure(client, positioning_payload, monkeypatch):
    def fail(record):
        raise WebhookError("Failed to send data")

    monkeypatch.setattr(app_module, "send_to_webhook", fail)
    payload = dict(positioning_payload, positioning="P", uvp="U", tagline="T")

    resp = client.post("/send_to_webhook", json=payload)

    assert resp.status_code == 502
    assert resp.get_json()["error"] == "Failed to send data"
