"""
Unit tests for src/api/routes/telegram.py
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from src.api.main import app
from src.api.routes import telegram as telegram_routes


class RecordingHandler:
    def __init__(self):
        self.updates = []

    async def handle_update(self, update) -> bool:
        self.updates.append(update)
        return True


def fake_settings(secret: str = ""):
    return SimpleNamespace(
        telegram=SimpleNamespace(bot_token="", webhook_url="", webhook_secret=secret)
    )


@pytest.fixture
def client():
    return TestClient(app)


UPDATE = {
    "update_id": 1,
    "message": {
        "message_id": 10,
        "date": 1700000000,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 7, "is_bot": False, "first_name": "T"},
        "text": "강남구",
    },
}


class TestWebhook:
    """Tests for POST /webhook/telegram."""

    def test_bot_not_configured(self, client, monkeypatch):
        monkeypatch.setattr(telegram_routes, "get_settings", lambda: fake_settings())
        monkeypatch.setattr(telegram_routes, "_bot", None)
        monkeypatch.setattr(telegram_routes, "_handler", None)

        resp = client.post("/webhook/telegram", json=UPDATE)

        assert resp.status_code == 200
        assert resp.json() == {"status": False, "error": "Bot not configured"}

    def test_bad_secret(self, client, monkeypatch):
        monkeypatch.setattr(telegram_routes, "get_settings", lambda: fake_settings("s3cret"))

        resp = client.post(
            "/webhook/telegram",
            json=UPDATE,
            headers={"X-Telegram-Bot-Api-Secret-Token": "wrong"},
        )

        assert resp.status_code == 403
        assert resp.json() == {"success": False, "message": "Invalid secret token"}

    def test_update_routed_to_handler(self, client, monkeypatch):
        handler = RecordingHandler()
        monkeypatch.setattr(telegram_routes, "get_settings", lambda: fake_settings("s3cret"))
        monkeypatch.setattr(telegram_routes, "_bot", SimpleNamespace(bot=None))
        monkeypatch.setattr(telegram_routes, "_handler", handler)

        resp = client.post(
            "/webhook/telegram",
            json=UPDATE,
            headers={"X-Telegram-Bot-Api-Secret-Token": "s3cret"},
        )

        assert resp.json() == {"status": True}
        assert handler.updates[0].message.text == "강남구"
        assert handler.updates[0].message.chat_id == 42


class TestWebhookManagement:
    def test_info_without_bot(self, client, monkeypatch):
        monkeypatch.setattr(telegram_routes, "_bot", None)

        resp = client.get("/webhook/telegram/info")

        assert resp.status_code == 503
        assert resp.json()["success"] is False
