"""Shared fixtures."""

import sys
from pathlib import Path

import pytest


def ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


ensure_root_on_path()

import gpt_engine  # noqa: E402
from fakes import FakeClient  # noqa: E402


@pytest.fixture
def fake_gateway(monkeypatch):
    """Install a fake client; the responder gets (prompt kind, attempt number)."""

    def install(responder):
        client = FakeClient(responder)
        monkeypatch.setattr(gpt_engine.time, "sleep", client.sleeps.append)
        monkeypatch.setattr(gpt_engine, "get_client", lambda: client)
        return client

    return install


@pytest.fixture
def positioning_payload():
    return {
        "productName": "FieldSense",
        "targetAudience": "independent farm managers",
        "painPoints": "guesswork, wasted trips, late decisions",
        "productBenefit": "see every field before sunrise",
        "competitors": "Acme Agro, Globex",
        "differentiators": "satellite data checked by agronomists",
    }
